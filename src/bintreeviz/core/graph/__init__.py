"""Graph package initialization.

Exposes the tree traversal and the graph description it produces.
"""

from bintreeviz.core.graph.description import (
    ChildSide,
    GraphNode,
    GraphEdge,
    GraphDescription
)
from bintreeviz.core.graph.builder import TreeNode, NodeIdentity, TreeGraphBuilder

__all__ = [
    # Description
    "ChildSide",
    "GraphNode",
    "GraphEdge",
    "GraphDescription",

    # Traversal
    "TreeNode",
    "NodeIdentity",
    "TreeGraphBuilder",
]

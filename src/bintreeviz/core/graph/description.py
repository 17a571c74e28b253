"""Graph description produced from a binary tree.

A GraphDescription is an engine-neutral record of what to draw: labelled
nodes and directed parent -> child edges, both kept in insertion order so
repeated conversions of the same tree compare equal.
"""

from typing import Dict, List, Optional
from enum import Enum
from pydantic import BaseModel, Field


class ChildSide(str, Enum):
    """Which child slot an edge leads to."""
    LEFT = "left"
    RIGHT = "right"


class GraphNode(BaseModel):
    """A drawable node."""
    id: str = Field(description="Unique graph-node id")
    label: str = Field(description="Text shown inside the node")


class GraphEdge(BaseModel):
    """A directed edge from a parent graph-node to a child graph-node."""
    tail: str = Field(description="Parent graph-node id")
    head: str = Field(description="Child graph-node id")
    side: ChildSide = Field(description="Child slot the edge leads to")


class GraphDescription(BaseModel):
    """Nodes and edges built for one conversion.

    Attributes:
        nodes: Graph-nodes in first-seen order
        edges: Edges in creation order (pre-order, left before right)
    """
    nodes: List[GraphNode] = Field(default_factory=list)
    edges: List[GraphEdge] = Field(default_factory=list)

    def add_node(self, node_id: str, label: str) -> GraphNode:
        node = GraphNode(id=node_id, label=label)
        self.nodes.append(node)
        return node

    def add_edge(self, tail: str, head: str, side: ChildSide) -> GraphEdge:
        edge = GraphEdge(tail=tail, head=head, side=side)
        self.edges.append(edge)
        return edge

    def node_ids(self) -> List[str]:
        return [node.id for node in self.nodes]

    def labels(self) -> Dict[str, str]:
        """Map of graph-node id to label."""
        return {node.id: node.label for node in self.nodes}

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def in_degree(self, node_id: str) -> int:
        return sum(1 for edge in self.edges if edge.head == node_id)

    def out_degree(self, node_id: str) -> int:
        return sum(1 for edge in self.edges if edge.tail == node_id)

    def is_empty(self) -> bool:
        return not self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

"""Layout engine backends."""

from bintreeviz.core.engine.base import LayoutEngine, GraphHandle
from bintreeviz.core.engine.graphviz_engine import GraphvizEngine

__all__ = [
    "LayoutEngine",
    "GraphHandle",
    "GraphvizEngine",
]

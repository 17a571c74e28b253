"""Layout engine interface.

A LayoutEngine is the narrow surface the visualizer needs from a graph
layout backend: open a directed graph, add labelled nodes and edges, lay it
out with a named strategy, render it to a file and release everything again.
The engine object itself is the long-lived context; a GraphHandle is the
per-call graph.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional, Union

from bintreeviz.core.exceptions import EngineClosedError, GraphOpenError, RenderError, Stage


class GraphHandle:
    """A graph opened on an engine.

    Attributes:
        name: Graph name
        graph: Backend graph object
        layout: Backend layout result, None until layout() succeeds
        strategy: Layout strategy of the current layout
        closed: Whether close_graph() released the handle
    """

    def __init__(self, name: str, graph: Any):
        self.name = name
        self.graph = graph
        self.layout: Optional[Any] = None
        self.strategy: Optional[str] = None
        self.closed = False

    @property
    def has_layout(self) -> bool:
        return self.layout is not None

    def __repr__(self) -> str:
        state = "closed" if self.closed else ("laid out" if self.has_layout else "open")
        return f"<GraphHandle {self.name!r} {state}>"


class LayoutEngine(ABC):
    """Abstract base for layout/render backends."""

    def __init__(self) -> None:
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the engine context. Safe to call more than once."""
        self._closed = True

    def _check_open(self) -> None:
        if self._closed:
            raise EngineClosedError(f"{type(self).__name__} context was already released")

    def _check_handle(self, handle: GraphHandle) -> None:
        self._check_open()
        if handle.closed:
            raise GraphOpenError(f"Graph {handle.name!r} was already closed")

    def _check_layout(self, handle: GraphHandle) -> None:
        self._check_handle(handle)
        if not handle.has_layout:
            raise RenderError(f"Graph {handle.name!r} has no layout", stage=Stage.RENDER)

    @abstractmethod
    def open_graph(self, name: str) -> GraphHandle:
        """Open a new, empty directed graph."""
        pass

    @abstractmethod
    def add_node(self, handle: GraphHandle, node_id: str, label: str, **attrs: str) -> None:
        """Add a node with a label (and optional extra attributes)."""
        pass

    @abstractmethod
    def add_edge(self, handle: GraphHandle, tail: str, head: str, **attrs: str) -> None:
        """Add a directed edge between two existing node ids."""
        pass

    @abstractmethod
    def layout(self, handle: GraphHandle, strategy: str) -> None:
        """Compute a layout for the graph using a named strategy."""
        pass

    @abstractmethod
    def render(self, handle: GraphHandle, format: str, filename: Union[str, Path]) -> Path:
        """Render the laid-out graph to ``filename`` in ``format``.

        Returns:
            The path written
        """
        pass

    @abstractmethod
    def source(self, handle: GraphHandle) -> str:
        """Return the graph in the backend's textual source form."""
        pass

    def free_layout(self, handle: GraphHandle) -> None:
        """Drop the layout held by a graph."""
        handle.layout = None
        handle.strategy = None

    def close_graph(self, handle: GraphHandle) -> None:
        """Release a graph, and any layout it still holds. Safe to call more than once."""
        handle.layout = None
        handle.strategy = None
        handle.graph = None
        handle.closed = True

    def __enter__(self) -> "LayoutEngine":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

"""Shared test fixtures.

Provides a minimal tree node type, the sample tree used across the suite,
a recording layout engine that never calls Graphviz, and a real Graphviz
engine fixture that skips when the executables are missing.
"""

from pathlib import Path
from typing import List, Tuple, Union

import pytest

from bintreeviz.core.engine.base import GraphHandle, LayoutEngine
from bintreeviz.core.exceptions import (
    EngineInitializationError,
    LayoutError,
    RenderError,
    UnsupportedFormatError,
)


class Node:
    """Plain binary tree node labelled by its value."""

    def __init__(self, value: str, left: "Node" = None, right: "Node" = None):
        self.value = value
        self.left = left
        self.right = right

    def __str__(self) -> str:
        return self.value


class RecordingEngine(LayoutEngine):
    """Layout engine that records every call instead of drawing.

    Attributes:
        calls: (method, args) tuples in call order
        fail_layout: Raise LayoutError from layout()
        fail_render: Raise RenderError from render()
        formats: Formats render() accepts
    """

    def __init__(self, fail_layout: bool = False, fail_render: bool = False):
        super().__init__()
        self.calls: List[Tuple[str, tuple]] = []
        self.handles: List[GraphHandle] = []
        self.fail_layout = fail_layout
        self.fail_render = fail_render
        self.formats = {"svg", "png", "dot"}

    def open_graph(self, name: str) -> GraphHandle:
        self._check_open()
        self.calls.append(("open_graph", (name,)))
        handle = GraphHandle(name, {"nodes": [], "edges": []})
        self.handles.append(handle)
        return handle

    def add_node(self, handle: GraphHandle, node_id: str, label: str, **attrs: str) -> None:
        self._check_handle(handle)
        self.calls.append(("add_node", (node_id, label)))
        handle.graph["nodes"].append((node_id, label))

    def add_edge(self, handle: GraphHandle, tail: str, head: str, **attrs: str) -> None:
        self._check_handle(handle)
        self.calls.append(("add_edge", (tail, head, attrs)))
        handle.graph["edges"].append((tail, head))

    def layout(self, handle: GraphHandle, strategy: str) -> None:
        self._check_handle(handle)
        self.calls.append(("layout", (strategy,)))
        if self.fail_layout:
            raise LayoutError("layout exploded")
        handle.layout = "positioned"
        handle.strategy = strategy

    def render(self, handle: GraphHandle, format: str, filename: Union[str, Path]) -> Path:
        self._check_layout(handle)
        self.calls.append(("render", (format, str(filename))))
        if format not in self.formats:
            raise UnsupportedFormatError(format)
        if self.fail_render:
            raise RenderError("render exploded")
        path = Path(filename)
        path.write_text(self.source(handle))
        return path

    def source(self, handle: GraphHandle) -> str:
        self._check_handle(handle)
        lines = [f"{node_id} {label}" for node_id, label in handle.graph["nodes"]]
        lines += [f"{tail} -> {head}" for tail, head in handle.graph["edges"]]
        return "\n".join(lines)

    def free_layout(self, handle: GraphHandle) -> None:
        self.calls.append(("free_layout", ()))
        super().free_layout(handle)

    def close_graph(self, handle: GraphHandle) -> None:
        self.calls.append(("close_graph", ()))
        super().close_graph(handle)

    def names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def edges(self) -> List[Tuple[str, str]]:
        return [(args[0], args[1]) for name, args in self.calls if name == "add_edge"]


@pytest.fixture
def node_cls() -> type:
    """Fixture providing the tree node type."""
    return Node


@pytest.fixture
def sample_tree() -> Node:
    """Fixture providing a full three-level tree."""
    return Node(
        "root",
        Node("left", Node("left.left"), Node("left.right")),
        Node("right", Node("right.left"), Node("right.right")),
    )


@pytest.fixture
def recording_engine() -> RecordingEngine:
    """Fixture providing a recording engine."""
    return RecordingEngine()


@pytest.fixture
def recording_engine_cls() -> type:
    """Fixture providing the recording engine type, for failure variants."""
    return RecordingEngine


@pytest.fixture
def graphviz_engine():
    """Fixture providing a real Graphviz engine, skipping if unavailable."""
    from bintreeviz.core.engine.graphviz_engine import GraphvizEngine

    try:
        engine = GraphvizEngine()
    except EngineInitializationError as e:
        pytest.skip(f"Graphviz not installed: {e}")
    yield engine
    engine.close()

"""Graphviz layout engine.

Backs the LayoutEngine interface with the ``graphviz`` package. Layout runs
the named Graphviz engine and keeps the positioned DOT it returns; rendering
feeds that positioned DOT to ``neato -n2``, which draws nodes and edges where
the layout put them instead of laying the graph out again.
"""

from pathlib import Path
from typing import Dict, Optional, Union

import graphviz

from bintreeviz.core.engine.base import GraphHandle, LayoutEngine
from bintreeviz.core.exceptions import (
    EngineInitializationError,
    GraphOpenError,
    LayoutError,
    RenderError,
    UnsupportedFormatError,
    WriteError,
)
from bintreeviz.core.logging import LogComponent, get_logger, log_verbose

logger = get_logger(LogComponent.ENGINE)

# Renders pre-positioned graphs without moving nodes or rerouting edges
_RENDER_ENGINE = "neato"
_NEATO_NO_OP = 2


class GraphvizEngine(LayoutEngine):
    """Layout engine backed by the Graphviz executables.

    Attributes:
        graph_attrs: Attributes applied to every opened graph
        node_attrs: Default attributes for every node
        edge_attrs: Default attributes for every edge
        version: Graphviz version found on the PATH
    """

    def __init__(
        self,
        graph_attrs: Optional[Dict[str, str]] = None,
        node_attrs: Optional[Dict[str, str]] = None,
        edge_attrs: Optional[Dict[str, str]] = None
    ) -> None:
        super().__init__()
        self.graph_attrs = dict(graph_attrs or {})
        self.node_attrs = dict(node_attrs or {})
        self.edge_attrs = dict(edge_attrs or {})
        try:
            self.version = graphviz.version()
        except graphviz.ExecutableNotFound as e:
            raise EngineInitializationError(
                "Graphviz executables not found on PATH", details={"cause": str(e)}
            ) from e
        except (graphviz.CalledProcessError, RuntimeError) as e:
            raise EngineInitializationError(
                f"Could not query Graphviz version: {e}"
            ) from e
        log_verbose(logger, f"Graphviz {'.'.join(map(str, self.version))} ready")

    def open_graph(self, name: str) -> GraphHandle:
        self._check_open()
        try:
            graph = graphviz.Digraph(
                name=name,
                graph_attr=self.graph_attrs,
                node_attr=self.node_attrs,
                edge_attr=self.edge_attrs,
            )
        except (TypeError, ValueError) as e:
            raise GraphOpenError(f"Could not open graph {name!r}: {e}") from e
        return GraphHandle(name, graph)

    def add_node(self, handle: GraphHandle, node_id: str, label: str, **attrs: str) -> None:
        self._check_handle(handle)
        # Labels are plain text: backslashes kept, <html> not parsed
        handle.graph.node(node_id, label=graphviz.escape(label), **attrs)

    def add_edge(self, handle: GraphHandle, tail: str, head: str, **attrs: str) -> None:
        self._check_handle(handle)
        handle.graph.edge(tail, head, **attrs)

    def layout(self, handle: GraphHandle, strategy: str) -> None:
        self._check_handle(handle)
        if strategy not in graphviz.ENGINES:
            raise LayoutError(
                f"Unknown layout strategy: {strategy!r}",
                details={"known": sorted(graphviz.ENGINES)}
            )
        try:
            positioned = handle.graph.pipe(format="dot", engine=strategy)
        except (graphviz.CalledProcessError, graphviz.ExecutableNotFound) as e:
            raise LayoutError(f"Graphviz {strategy} failed: {e}") from e
        handle.layout = positioned
        handle.strategy = strategy
        log_verbose(logger, f"Laid out {handle.name!r} with {strategy}")

    def render(self, handle: GraphHandle, format: str, filename: Union[str, Path]) -> Path:
        self._check_layout(handle)
        path = Path(filename)
        try:
            data = graphviz.pipe(
                _RENDER_ENGINE,
                format,
                handle.layout,
                neato_no_op=_NEATO_NO_OP,
            )
        except ValueError as e:
            raise UnsupportedFormatError(format, details={"cause": str(e)}) from e
        except (graphviz.CalledProcessError, graphviz.ExecutableNotFound) as e:
            raise RenderError(f"Graphviz could not render {format!r}: {e}") from e

        try:
            path.write_bytes(data)
        except OSError as e:
            raise WriteError(
                f"Could not write {path}: {e.strerror or e}",
                details={"path": str(path)}
            ) from e
        log_verbose(logger, f"Rendered {handle.name!r} to {path} ({len(data)} bytes)")
        return path

    def source(self, handle: GraphHandle) -> str:
        self._check_handle(handle)
        return handle.graph.source

"""Binary tree visualization.

BinaryTreeVisualizer owns one layout engine context and turns trees into
rendered diagrams:

1. Build a GraphDescription from the tree (TreeGraphBuilder)
2. Open a graph on the engine and push the nodes and edges into it
3. Lay the graph out (hierarchical "dot" layout by default)
4. Render it to a file in the requested format
5. Release the layout and the graph, on success and on failure

Example:
    ```python
    with BinaryTreeVisualizer() as visualizer:
        visualizer.visualize(root, "svg", "binary_tree.svg")
    ```
"""

from pathlib import Path
from typing import Any, Optional, Union

from bintreeviz.core.config import VisualizerConfig
from bintreeviz.core.engine.base import GraphHandle, LayoutEngine
from bintreeviz.core.engine.graphviz_engine import GraphvizEngine
from bintreeviz.core.exceptions import GraphOpenError, Stage, TreeVizError
from bintreeviz.core.graph.builder import LabelFn, TreeGraphBuilder
from bintreeviz.core.graph.description import ChildSide, GraphDescription
from bintreeviz.core.logging import LogComponent, get_logger, log_verbose

logger = get_logger(LogComponent.VISUALIZER)

# Edge tail ports used when show_child_side is on
_SIDE_PORTS = {ChildSide.LEFT: "sw", ChildSide.RIGHT: "se"}


class BinaryTreeVisualizer:
    """Render binary trees through a layout engine.

    The engine context is acquired once, in the constructor, and reused by
    every visualize() call until close(). Graphs are per call.

    Attributes:
        config: Visualizer configuration
        engine: Layout engine context owned by this visualizer
        builder: Traversal used to convert trees
    """

    def __init__(
        self,
        engine: Optional[LayoutEngine] = None,
        config: Optional[VisualizerConfig] = None
    ) -> None:
        self.config = config or VisualizerConfig()
        if engine is None:
            engine = GraphvizEngine(
                graph_attrs=self.config.graph_attrs,
                node_attrs=self.config.node_attrs,
                edge_attrs=self.config.edge_attrs,
            )
        self.engine = engine
        self.builder = TreeGraphBuilder(
            self.config.builder,
            trace=self.config.logging.show_traversal
        )

    @property
    def closed(self) -> bool:
        return self.engine.closed

    def close(self) -> None:
        """Release the engine context."""
        if not self.engine.closed:
            self.engine.close()
            log_verbose(logger, "Engine context released")

    def __enter__(self) -> "BinaryTreeVisualizer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def to_description(self, root: Optional[Any], label: Optional[LabelFn] = None) -> GraphDescription:
        """Convert a tree to a GraphDescription without touching the engine."""
        return self.builder.build(root, label)

    def populate(self, handle: GraphHandle, description: GraphDescription) -> None:
        """Push a description's nodes, then its edges, into an open graph."""
        for node in description.nodes:
            self.engine.add_node(handle, node.id, node.label)
        for edge in description.edges:
            if self.config.show_child_side:
                self.engine.add_edge(handle, edge.tail, edge.head, tailport=_SIDE_PORTS[edge.side])
            else:
                self.engine.add_edge(handle, edge.tail, edge.head)

    def to_source(self, root: Optional[Any], label: Optional[LabelFn] = None) -> str:
        """Return the engine's source text (DOT for Graphviz) for a tree."""
        handle = self._open(self.to_description(root, label))
        try:
            return self.engine.source(handle)
        finally:
            self.engine.close_graph(handle)

    def visualize(
        self,
        root: Optional[Any],
        format: Optional[str] = None,
        filename: Optional[Union[str, Path]] = None,
        label: Optional[LabelFn] = None
    ) -> Path:
        """Render the tree under ``root`` to a file.

        Args:
            root: Root node, or None to render an empty graph
            format: Output format understood by the engine (default "svg")
            filename: Output path, overwritten if present (default "binary_tree.svg")
            label: Optional function producing a node's label (default: str)

        Returns:
            Path of the written file

        Raises:
            TreeVizError: Tagged with the stage that failed (open, layout, render)
        """
        if format is None:
            format = self.config.default_format
        if filename is None:
            filename = self.config.default_filename
        strategy = self.config.layout_strategy

        description = self.to_description(root, label)
        try:
            handle = self._open(description)
            try:
                self.engine.layout(handle, strategy)
                try:
                    path = self.engine.render(handle, format, filename)
                finally:
                    self.engine.free_layout(handle)
            finally:
                self.engine.close_graph(handle)
        except TreeVizError as e:
            stage = e.stage.value if e.stage else "unknown"
            logger.error(f"Visualization failed at {stage} stage: {e}")
            raise

        logger.stage(
            f"Rendered {len(description.nodes)} nodes, {len(description.edges)} edges "
            f"to {path} ({format}, {strategy} layout)"
        )
        return path

    def _open(self, description: GraphDescription) -> GraphHandle:
        handle = self.engine.open_graph(self.config.graph_name)
        try:
            self.populate(handle, description)
        except TreeVizError:
            self.engine.close_graph(handle)
            raise
        except Exception as e:
            self.engine.close_graph(handle)
            raise GraphOpenError(f"Could not populate graph: {e}", stage=Stage.OPEN) from e
        return handle

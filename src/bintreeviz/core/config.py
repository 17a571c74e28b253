"""Configuration models for tree conversion and rendering."""

from typing import Dict
from pydantic import BaseModel, Field, field_validator

from bintreeviz.core.logging import TreeVizLoggingConfig


class BuilderConfig(BaseModel):
    """Configuration for the tree-to-graph traversal.

    Attributes:
        left_attr: Attribute holding a node's left child
        right_attr: Attribute holding a node's right child
        id_prefix: Prefix for generated graph-node ids ("n" gives n0, n1, ...)
    """
    left_attr: str = Field(default="left", description="Left child attribute name")
    right_attr: str = Field(default="right", description="Right child attribute name")
    id_prefix: str = Field(default="n", description="Prefix for graph-node ids")

    @field_validator("left_attr", "right_attr")
    @classmethod
    def _check_attr_name(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"Not a valid attribute name: {value!r}")
        return value

    @field_validator("id_prefix")
    @classmethod
    def _check_prefix(cls, value: str) -> str:
        if not value or not value[0].isalpha():
            raise ValueError("id_prefix must start with a letter")
        return value


class VisualizerConfig(BaseModel):
    """Configuration for BinaryTreeVisualizer.

    Attributes:
        layout_strategy: Graphviz layout engine used for every graph
        default_format: Output format used when visualize() gets none
        default_filename: Output path used when visualize() gets none
        graph_name: Name given to each opened graph
        graph_attrs: Graph-level attributes (e.g. {"rankdir": "TB"})
        node_attrs: Default node attributes (e.g. {"shape": "circle"})
        edge_attrs: Default edge attributes
        show_child_side: Attach edges to the south-west/south-east corner
            of the parent so left and right children stay visually apart
        builder: Traversal configuration
        logging: Logging verbosity for the visualizer
    """
    layout_strategy: str = Field(default="dot", min_length=1)
    default_format: str = Field(default="svg", min_length=1)
    default_filename: str = Field(default="binary_tree.svg", min_length=1)
    graph_name: str = Field(default="G", min_length=1)
    graph_attrs: Dict[str, str] = Field(default_factory=dict)
    node_attrs: Dict[str, str] = Field(default_factory=dict)
    edge_attrs: Dict[str, str] = Field(default_factory=dict)
    show_child_side: bool = False
    builder: BuilderConfig = Field(default_factory=BuilderConfig)
    logging: TreeVizLoggingConfig = Field(default_factory=TreeVizLoggingConfig)

"""bintreeviz - draw binary trees with Graphviz."""

import logging

from bintreeviz.core import (
    BinaryTreeVisualizer,
    VisualizerConfig,
    BuilderConfig,
    TreeGraphBuilder,
    GraphDescription,
    TreeVizError,
    configure_logging,
    LogLevel,
    LogComponent,
)

__version__ = "0.1.0"

__all__ = [
    'BinaryTreeVisualizer',
    'VisualizerConfig',
    'BuilderConfig',
    'TreeGraphBuilder',
    'GraphDescription',
    'TreeVizError',
    'configure_logging',
    'LogLevel',
    'LogComponent',
]

logging.getLogger(__name__).addHandler(logging.NullHandler())

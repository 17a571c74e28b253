"""Core modules for bintreeviz."""

from bintreeviz.core.logging import configure_logging, LogLevel, LogComponent
from bintreeviz.core.config import VisualizerConfig, BuilderConfig
from bintreeviz.core.exceptions import (
    Stage,
    TreeVizError,
    EngineInitializationError,
    EngineClosedError,
    GraphOpenError,
    LayoutError,
    RenderError,
    UnsupportedFormatError,
    WriteError,
)
from bintreeviz.core.graph import TreeGraphBuilder, GraphDescription
from bintreeviz.core.engine import LayoutEngine, GraphHandle, GraphvizEngine
from bintreeviz.core.visualizer import BinaryTreeVisualizer

__all__ = [
    'BinaryTreeVisualizer',
    'VisualizerConfig',
    'BuilderConfig',
    'TreeGraphBuilder',
    'GraphDescription',
    'LayoutEngine',
    'GraphvizEngine',
    'GraphHandle',
    'Stage',
    'TreeVizError',
    'EngineInitializationError',
    'EngineClosedError',
    'GraphOpenError',
    'LayoutError',
    'RenderError',
    'UnsupportedFormatError',
    'WriteError',
    'configure_logging',
    'LogLevel',
    'LogComponent'
]

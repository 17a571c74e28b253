"""
Custom exceptions for bintreeviz.

Every failure raised while drawing a tree carries the stage it happened in,
so callers can tell a missing Graphviz install from a bad output format.
"""

from enum import Enum
from typing import Optional


class Stage(str, Enum):
    """Stages of a visualize() call."""
    INIT = "init"
    OPEN = "open"
    LAYOUT = "layout"
    RENDER = "render"


class TreeVizError(Exception):
    """Base exception class for bintreeviz errors."""

    default_stage: Optional[Stage] = None

    def __init__(self, message: str, stage: Optional[Stage] = None, details: dict = None):
        super().__init__(message)
        self.stage = stage or self.default_stage
        self.details = details or {}

    def __str__(self) -> str:
        message = super().__str__()
        if self.stage is None:
            return message
        return f"[{self.stage.value}] {message}"


class EngineInitializationError(TreeVizError):
    """Raised when the layout engine context cannot be acquired."""
    default_stage = Stage.INIT


class EngineClosedError(TreeVizError):
    """Raised when an engine context is used after it was released."""
    pass


class GraphOpenError(TreeVizError):
    """Raised when a new graph cannot be opened or populated."""
    default_stage = Stage.OPEN


class LayoutError(TreeVizError):
    """Raised when the engine cannot compute a layout."""
    default_stage = Stage.LAYOUT


class RenderError(TreeVizError):
    """Raised when the laid-out graph cannot be rendered."""
    default_stage = Stage.RENDER


class UnsupportedFormatError(RenderError):
    """Raised when the engine does not know the requested output format."""

    def __init__(self, format: str, details: dict = None):
        super().__init__(f"Unsupported output format: {format!r}", details=details)
        self.format = format


class WriteError(RenderError):
    """Raised when the rendered output cannot be written to its target path."""
    pass

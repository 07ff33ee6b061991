"""Custom widgets for the Modal Input TUI."""

from .frame import Canvas, FrameView, paint

__all__ = [
    "Canvas",
    "FrameView",
    "paint",
]

"""Application state for the modal input TUI.

A passive data holder: the app owns one instance for the whole run, lends
it to the controller for each key press and to the renderer for each frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Mode(str, Enum):
    """Editing mode."""

    NORMAL = "normal"  # Navigation keys, quit with q
    INSERT = "insert"  # Typing into the input line

    def __str__(self) -> str:
        return self.value


@dataclass
class AppState:
    """Mutable state shared by the controller and renderer.

    Attributes:
        mode: Current editing mode
        input_buffer: Text currently being typed
        last_submission: Most recently submitted line
    """

    mode: Mode = Mode.NORMAL
    input_buffer: str = ""
    last_submission: str = ""

"""Frame renderer: turns the application state into a draw plan.

Layout:
┌──────────────────────────────────────────────┐
│ last submission, word-wrapped                │  body (flexible)
│                                              │
├──────────────────────────────────────────────┤
│ insert               <filled char> <bg char> │  status bar (1 row)
├──────────────────────────────────────────────┤
│ text being typed█                            │  input line (1 row)
└──────────────────────────────────────────────┘

Everything here is pure: the state is only read, and the plan is plain
data that the drawing surface paints.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Literal

from rich.cells import cell_len
from rich.console import Console
from rich.style import Style
from rich.text import Text

from .config import Settings
from .state import AppState, Mode

Alignment = Literal["left", "right"]

STATUS_HEIGHT = 1
INPUT_HEIGHT = 1

# Only used for its wrapping defaults, never printed to
_wrap_console = Console(file=io.StringIO(), color_system=None)


@dataclass(frozen=True)
class Rect:
    """A rectangular region of the frame, in cells."""

    x: int
    y: int
    width: int
    height: int

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class FrameLayout:
    """The three regions of a frame, top to bottom."""

    body: Rect
    status: Rect
    input_line: Rect


@dataclass
class TextBlock:
    """Styled text to draw inside a region."""

    rect: Rect
    lines: list[str]
    style: Style
    align: Alignment = "left"


@dataclass
class DrawPlan:
    """Everything needed to draw one frame."""

    layout: FrameLayout
    blocks: list[TextBlock] = field(default_factory=list)
    cursor: tuple[int, int] | None = None


def split_layout(area: Rect) -> FrameLayout:
    """Split the frame into body, status bar and input line.

    The input line and status bar get their fixed height first; the body
    takes the rest. Frames shorter than three rows lose the body first,
    then the status bar.
    """
    height = max(area.height, 0)
    width = max(area.width, 0)
    input_height = min(INPUT_HEIGHT, height)
    status_height = min(STATUS_HEIGHT, height - input_height)
    body_height = height - input_height - status_height

    body = Rect(area.x, area.y, width, body_height)
    status = Rect(area.x, body.bottom, width, status_height)
    input_line = Rect(area.x, status.bottom, width, input_height)
    return FrameLayout(body=body, status=status, input_line=input_line)


def wrap_text(text: str, width: int) -> list[str]:
    """Word-wrap text to a cell width, trimming each wrapped line."""
    if width <= 0 or not text:
        return []
    lines = Text(text).wrap(_wrap_console, width, justify="left", overflow="fold")
    return [line.plain.strip() for line in lines]


def cursor_position(layout: FrameLayout, state: AppState) -> tuple[int, int] | None:
    """Cursor cell for the input line, or None outside insert mode."""
    if state.mode is not Mode.INSERT or layout.input_line.is_empty:
        return None
    origin = layout.input_line
    return (origin.x + cell_len(state.input_buffer), origin.y)


def render_frame(
    width: int,
    height: int,
    state: AppState,
    settings: Settings | None = None,
) -> DrawPlan:
    """Build the draw plan for a frame of the given size.

    Args:
        width: Frame width in cells
        height: Frame height in cells
        state: Current application state (read only)
        settings: Palette and status text; defaults if None

    Returns:
        DrawPlan with one block per region plus the cursor position
    """
    settings = settings or Settings()
    palette = settings.palette
    layout = split_layout(Rect(0, 0, width, height))

    body = layout.body
    body_lines = wrap_text(state.last_submission, body.width)[: max(body.height, 0)]

    blocks = [
        TextBlock(body, body_lines, palette.body_style),
        TextBlock(layout.status, [f" {state.mode}"], palette.bar_style),
        TextBlock(layout.status, [settings.status_hint], palette.bar_style, align="right"),
        TextBlock(layout.input_line, [state.input_buffer], palette.body_style),
    ]

    return DrawPlan(layout=layout, blocks=blocks, cursor=cursor_position(layout, state))

"""Frame widget and the cell canvas it paints draw plans onto.

The canvas is a grid of cells. Blocks first set the style of their region,
then write their text aligned inside it, so two blocks can share a row
(the status bar's left and right text). Wide characters take two cells:
the second holds an empty continuation marker and is skipped when the row
is turned into Rich text.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.cells import cell_len
from rich.style import Style
from rich.text import Text
from textual.widget import Widget

from ..renderer import DrawPlan, Rect, TextBlock, render_frame

CURSOR_STYLE = Style(reverse=True)


@dataclass
class Cell:
    char: str = " "
    style: Style = Style.null()

    @property
    def is_continuation(self) -> bool:
        return self.char == ""


def clip_to_width(line: str, width: int) -> str:
    """Longest prefix of line that fits in width cells.

    A wide character that would straddle the edge is dropped whole.
    """
    used = 0
    for index, char in enumerate(line):
        used += cell_len(char)
        if used > width:
            return line[:index]
    return line


class Canvas:
    """A width x height grid of styled cells."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(width, 0)
        self.height = max(height, 0)
        self._rows = [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    def cell(self, x: int, y: int) -> Cell:
        return self._rows[y][x]

    def row_text(self, y: int) -> str:
        """Plain text of one row (continuation cells skipped)."""
        return "".join(cell.char for cell in self._rows[y])

    def fill(self, rect: Rect, style: Style) -> None:
        """Set the style of every cell in rect, keeping its character."""
        for y in range(max(rect.y, 0), min(rect.bottom, self.height)):
            row = self._rows[y]
            for x in range(max(rect.x, 0), min(rect.x + rect.width, self.width)):
                row[x].style = style

    def _break_wide(self, row: list[Cell], x: int) -> None:
        # Replace both halves of a wide char that is about to be overwritten
        cell = row[x]
        if cell.is_continuation and x > 0:
            row[x - 1].char = " "
            cell.char = " "
        elif cell_len(cell.char) == 2 and x + 1 < len(row):
            row[x + 1].char = " "

    def put(self, x: int, y: int, text: str, style: Style) -> None:
        """Write text starting at (x, y); cells outside the grid are dropped."""
        if not 0 <= y < self.height:
            return
        row = self._rows[y]
        last: Cell | None = None
        for char in text:
            width = cell_len(char)
            if width == 0:
                # Combining marks join the previous character
                if last is not None:
                    last.char += char
                continue
            if x >= 0 and x + width <= self.width:
                for cx in range(x, x + width):
                    self._break_wide(row, cx)
                last = row[x] = Cell(char, style)
                for cx in range(x + 1, x + width):
                    row[cx] = Cell("", style)
            else:
                last = None
            x += width

    def draw_block(self, block: TextBlock) -> None:
        """Fill the block's region and write its lines aligned inside it."""
        rect = block.rect
        if rect.is_empty:
            return
        self.fill(rect, block.style)
        for offset, line in enumerate(block.lines[: rect.height]):
            visible = clip_to_width(line, rect.width)
            if block.align == "right":
                x = rect.x + rect.width - cell_len(visible)
            else:
                x = rect.x
            self.put(x, rect.y + offset, visible, block.style)

    def set_cursor(self, x: int, y: int) -> None:
        """Show the cursor in reverse video if it is on the grid."""
        if 0 <= x < self.width and 0 <= y < self.height:
            cell = self._rows[y][x]
            cell.style = cell.style + CURSOR_STYLE

    def to_text(self) -> Text:
        """Convert the grid to Rich text, one line per row."""
        text = Text(no_wrap=True, overflow="crop", end="")
        for y, row in enumerate(self._rows):
            if y:
                text.append("\n")
            for cell in row:
                if not cell.is_continuation:
                    text.append(cell.char, cell.style)
        return text


def paint(plan: DrawPlan, width: int, height: int) -> Canvas:
    """Paint a draw plan onto a new canvas."""
    canvas = Canvas(width, height)
    for block in plan.blocks:
        canvas.draw_block(block)
    if plan.cursor is not None:
        canvas.set_cursor(*plan.cursor)
    return canvas


class FrameView(Widget):
    """Full-screen view of the app state: body, status bar and input line."""

    # Focused so key presses bubble from here to the app
    can_focus = True

    DEFAULT_CSS = """
    FrameView {
        width: 1fr;
        height: 1fr;
    }
    """

    def render(self) -> Text:
        width, height = self.size
        plan = render_frame(width, height, self.app.state, self.app.settings)
        return paint(plan, width, height).to_text()

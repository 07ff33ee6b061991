"""Modal Input TUI - Main Application.

Textual hosts the terminal session (raw mode, alternate screen, restoring
the terminal on exit or error) and delivers key events one at a time.
The app owns the AppState, hands each key to the controller and redraws
the frame afterwards.
"""

from __future__ import annotations

import logging

from textual import events
from textual.app import App, ComposeResult

from .config import Settings
from .controller import KeyOutcome, handle_key
from .keys import KeyPress
from .state import AppState
from .widgets.frame import FrameView

logger = logging.getLogger(__name__)


class ModalInputApp(App):
    """Single-line modal text entry.

    ┌─────────────────────────────────────────────┐
    │ hello world                                 │
    │                                             │
    │ insert            <filled char> <bg char>   │
    │ typing here█                                │
    └─────────────────────────────────────────────┘

    Keyboard:
        i       - Insert mode (from normal)
        Esc     - Normal mode (from insert)
        Enter   - Submit the input line
        Ctrl+W  - Delete last word
        q       - Quit (from normal)
    """

    TITLE = "Modal Input"

    # Every key goes to the controller
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        layout: vertical;
    }
    """

    def __init__(self, settings: Settings | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.settings = settings or Settings()
        self.state = AppState()

    def compose(self) -> ComposeResult:
        yield FrameView(id="frame")

    def on_key(self, event: events.Key) -> None:
        """Route a key press through the controller."""
        key = KeyPress.from_textual(event)
        outcome = handle_key(self.state, key)
        event.stop()

        if outcome is KeyOutcome.QUIT:
            logger.info("Quit requested")
            self.exit()
            return

        self.query_one("#frame", FrameView).refresh()


def run(settings: Settings | None = None) -> None:
    """Run the Modal Input TUI.

    Terminal and event-source failures propagate to the caller.

    Args:
        settings: Palette and status text (defaults if None)
    """
    app = ModalInputApp(settings)
    logger.info("Starting modal input TUI")
    app.run()
    logger.info("Modal input TUI exited")


if __name__ == "__main__":
    run()

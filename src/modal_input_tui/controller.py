"""Input controller: applies key presses to the application state.

Dispatch is a table keyed by the current Mode. Each handler mutates the
state in place and returns a KeyOutcome; nothing here raises for any key.

Normal mode:
    q       - Quit
    i       - Enter insert mode

Insert mode:
    Esc         - Back to normal mode
    Enter       - Submit the buffer (ignored when blank)
    Ctrl+H/W    - Delete the last word
    Backspace   - Delete the last character
    printable   - Append (a leading space is ignored)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from .keys import KeyCode, KeyPress
from .state import AppState, Mode

logger = logging.getLogger(__name__)


class KeyOutcome(Enum):
    """What the host loop should do after a key press."""

    CONTINUE = "continue"
    QUIT = "quit"  # Signal to exit the TUI


# Control-modified characters that delete the previous word
WORD_DELETE_CHARS = frozenset({"h", "w"})


def delete_last_word(text: str) -> str:
    """Remove the last space-separated word.

    The text is trimmed first, so trailing whitespace is discarded along
    with the last word: "foo bar " -> "foo". Empty and single-word input
    give "".
    """
    trimmed = text.strip()
    cut = trimmed.rfind(" ")
    if cut == -1:
        return ""
    return trimmed[:cut].strip()


def _handle_normal(state: AppState, key: KeyPress) -> KeyOutcome:
    if key.code is not KeyCode.CHAR or key.ctrl:
        return KeyOutcome.CONTINUE

    if key.char == "q":
        return KeyOutcome.QUIT
    if key.char == "i":
        state.mode = Mode.INSERT
        logger.debug("Mode: insert")
    return KeyOutcome.CONTINUE


def _submit(state: AppState) -> None:
    if not state.input_buffer.strip():
        return
    state.last_submission = state.input_buffer
    state.input_buffer = ""
    logger.debug(f"Submitted: {state.last_submission!r}")


def _insert_char(state: AppState, key: KeyPress) -> None:
    if key.ctrl:
        if key.char in WORD_DELETE_CHARS:
            state.input_buffer = delete_last_word(state.input_buffer)
        return

    # No leading whitespace in the buffer
    if key.char == " " and not state.input_buffer.strip():
        return
    state.input_buffer += key.char


def _handle_insert(state: AppState, key: KeyPress) -> KeyOutcome:
    if key.code is KeyCode.ESC:
        state.mode = Mode.NORMAL
        logger.debug("Mode: normal")
    elif key.code is KeyCode.ENTER:
        _submit(state)
    elif key.code is KeyCode.BACKSPACE:
        state.input_buffer = state.input_buffer[:-1]
    elif key.code is KeyCode.CHAR:
        _insert_char(state, key)
    return KeyOutcome.CONTINUE


_MODE_HANDLERS: dict[Mode, Callable[[AppState, KeyPress], KeyOutcome]] = {
    Mode.NORMAL: _handle_normal,
    Mode.INSERT: _handle_insert,
}


def handle_key(state: AppState, key: KeyPress) -> KeyOutcome:
    """Apply one key press to the state.

    Args:
        state: The application state, mutated in place
        key: The key that was pressed

    Returns:
        KeyOutcome.QUIT when the loop should stop, otherwise CONTINUE
    """
    return _MODE_HANDLERS[state.mode](state, key)

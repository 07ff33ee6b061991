"""Toolkit-independent key presses.

The controller works on KeyPress values so it can be driven from tests
without a terminal. `KeyPress.from_textual` adapts Textual key events.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from textual import events


class KeyCode(Enum):
    """Kind of key that was pressed."""

    CHAR = "char"
    ENTER = "enter"
    ESC = "esc"
    BACKSPACE = "backspace"
    OTHER = "other"


# Textual key names that map straight to a KeyCode
_SPECIAL_KEYS = {
    "escape": KeyCode.ESC,
    "enter": KeyCode.ENTER,
    "backspace": KeyCode.BACKSPACE,
}


@dataclass(frozen=True)
class KeyPress:
    """A single key press with its Control modifier."""

    code: KeyCode
    char: str = ""
    ctrl: bool = False

    @classmethod
    def char_key(cls, char: str, ctrl: bool = False) -> KeyPress:
        return cls(KeyCode.CHAR, char, ctrl)

    @classmethod
    def special(cls, code: KeyCode) -> KeyPress:
        return cls(code)

    @classmethod
    def from_key_name(cls, key: str, character: str | None = None) -> KeyPress:
        """Build a KeyPress from a Textual key name and character.

        Examples:
            ("escape", None)      -> ESC
            ("ctrl+w", "\\x17")    -> CHAR 'w' with ctrl
            ("space", " ")        -> CHAR ' '
            ("f1", None)          -> OTHER
        """
        if key in _SPECIAL_KEYS:
            return cls.special(_SPECIAL_KEYS[key])

        # Terminals commonly send Ctrl+Backspace as Ctrl+H
        if key == "ctrl+backspace":
            return cls.char_key("h", ctrl=True)

        if key.startswith("ctrl+"):
            rest = key[len("ctrl+") :]
            if len(rest) == 1:
                return cls.char_key(rest, ctrl=True)
            return cls.special(KeyCode.OTHER)

        if character is not None and len(character) == 1 and character.isprintable():
            return cls.char_key(character)

        return cls.special(KeyCode.OTHER)

    @classmethod
    def from_textual(cls, event: events.Key) -> KeyPress:
        """Translate a Textual key event."""
        return cls.from_key_name(event.key, event.character)

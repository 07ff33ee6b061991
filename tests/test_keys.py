"""Tests for translating Textual key names into KeyPress values."""

from types import SimpleNamespace

import pytest

from modal_input_tui.keys import KeyCode, KeyPress


@pytest.mark.parametrize(
    "key,character,expected",
    [
        ("escape", "\x1b", KeyPress.special(KeyCode.ESC)),
        ("enter", "\r", KeyPress.special(KeyCode.ENTER)),
        ("backspace", "\x7f", KeyPress.special(KeyCode.BACKSPACE)),
        ("ctrl+w", "\x17", KeyPress.char_key("w", ctrl=True)),
        ("ctrl+h", "\x08", KeyPress.char_key("h", ctrl=True)),
        ("ctrl+backspace", None, KeyPress.char_key("h", ctrl=True)),
        ("space", " ", KeyPress.char_key(" ")),
        ("a", "a", KeyPress.char_key("a")),
        ("H", "H", KeyPress.char_key("H")),
        ("question_mark", "?", KeyPress.char_key("?")),
        ("ctrl+left", None, KeyPress.special(KeyCode.OTHER)),
        ("tab", "\t", KeyPress.special(KeyCode.OTHER)),
        ("f1", None, KeyPress.special(KeyCode.OTHER)),
    ],
)
def test_from_key_name(key, character, expected):
    assert KeyPress.from_key_name(key, character) == expected


def test_from_textual_event():
    event = SimpleNamespace(key="ctrl+w", character="\x17")
    assert KeyPress.from_textual(event) == KeyPress.char_key("w", ctrl=True)


def test_plain_chars_have_no_ctrl():
    key = KeyPress.char_key("x")
    assert key.code is KeyCode.CHAR
    assert key.ctrl is False

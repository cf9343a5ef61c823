import pytest

from minivi.keymap import (
    CTRL_C,
    DELETE,
    ENTER,
    ESC,
    format_key,
    format_key_sequence,
    key_from_textual,
    parse_key,
    parse_key_sequence,
)


def test_parse_key_normalizes_names() -> None:
    assert parse_key("x") == "x"
    assert parse_key("ESC") == ESC
    assert parse_key("ret") == ENTER
    assert parse_key("C-c") == CTRL_C
    assert parse_key("ctrl-C") == CTRL_C


def test_parse_key_sequence_joins_tokens() -> None:
    assert parse_key_sequence("d d") == "dd"
    assert parse_key_sequence("$") == "$"
    assert parse_key_sequence("C-c ESC") == CTRL_C + ESC


def test_parse_key_rejects_invalid_tokens() -> None:
    with pytest.raises(ValueError, match="unknown key modifier"):
        parse_key("Q-a")
    with pytest.raises(ValueError, match="invalid key token"):
        parse_key("C-")
    with pytest.raises(ValueError, match="empty key sequence"):
        parse_key_sequence("   ")


def test_format_key_for_messages() -> None:
    assert format_key(CTRL_C) == "C-c"
    assert format_key(ESC) == "ESC"
    assert format_key(DELETE) == "DEL"
    assert format_key_sequence("dx") == "d x"


def test_key_from_textual_maps_to_raw_keystrokes() -> None:
    assert key_from_textual("escape", "\x1b") == ESC
    assert key_from_textual("enter", "\r") == ENTER
    assert key_from_textual("tab", "\t") == "\t"
    assert key_from_textual("backspace", "\x08") == DELETE
    assert key_from_textual("ctrl+c", "\x03") == CTRL_C
    assert key_from_textual("dollar_sign", "$") == "$"
    assert key_from_textual("j", "j") == "j"


def test_key_from_textual_ignores_special_keys() -> None:
    assert key_from_textual("up", None) is None
    assert key_from_textual("f1", None) is None
    assert key_from_textual("ctrl+up", None) is None

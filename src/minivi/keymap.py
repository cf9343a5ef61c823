"""Raw keystroke constants and key name translation."""

from __future__ import annotations

CTRL_C = "\x03"
BACKSPACE = "\x08"
TAB = "\t"
LINE_FEED = "\n"
ENTER = "\r"
ESC = "\x1b"
DELETE = "\x7f"

ENTER_KEYS = frozenset({ENTER, LINE_FEED})
BACKSPACE_KEYS = frozenset({DELETE, BACKSPACE})

NAMED_KEYS = {
    "ESC": ESC,
    "RET": ENTER,
    "TAB": TAB,
    "DEL": DELETE,
    "BS": BACKSPACE,
    "LFD": LINE_FEED,
    "SPC": " ",
}
_KEY_NAMES = {char: name for name, char in NAMED_KEYS.items()}

MODIFIER_ALIASES = {
    "C": "C",
    "CTRL": "C",
    "CONTROL": "C",
}

TEXTUAL_KEYS = {
    "escape": ESC,
    "enter": ENTER,
    "tab": TAB,
    "backspace": DELETE,
    "ctrl+h": BACKSPACE,
    "space": " ",
}


def parse_key(token: str) -> str:
    """Parse a key name such as ``x``, ``ESC`` or ``C-c`` into its raw character."""
    if not token:
        raise ValueError("empty key token")
    if len(token) == 1:
        return token

    named = NAMED_KEYS.get(token.upper())
    if named is not None:
        return named

    parts = token.split("-")
    if len(parts) != 2 or not parts[0] or len(parts[1]) != 1:
        raise ValueError(f"invalid key token: {token}")

    modifier = MODIFIER_ALIASES.get(parts[0].upper())
    if modifier is None:
        raise ValueError(f"unknown key modifier: {parts[0]}")
    return _control(parts[1])


def parse_key_sequence(sequence: str) -> str:
    """Parse whitespace separated key names into a string of raw keystrokes."""
    tokens = sequence.split()
    if not tokens:
        raise ValueError("empty key sequence")
    return "".join(parse_key(token) for token in tokens)


def format_key(char: str) -> str:
    """Render a raw keystroke for messages."""
    name = _KEY_NAMES.get(char)
    if name is not None:
        return name
    code = ord(char)
    if code < 0x20:
        return f"C-{chr(code + 0x60)}"
    return char


def format_key_sequence(keys: str) -> str:
    return " ".join(format_key(char) for char in keys)


def key_from_textual(key: str, character: str | None) -> str | None:
    """Translate a Textual key event into the raw keystroke a terminal would send."""
    raw = TEXTUAL_KEYS.get(key)
    if raw is not None:
        return raw

    if key.startswith("ctrl+"):
        base = key[len("ctrl+") :]
        if len(base) == 1 and base.isalpha():
            return _control(base)
        return None

    if character and len(character) == 1:
        return character
    return None


def _control(base: str) -> str:
    return chr(ord(base.lower()) & 0x1F)

"""Modal keystroke dispatcher mapping raw keys to editor operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .core import Editor
from .keymap import (
    BACKSPACE_KEYS,
    ENTER_KEYS,
    TAB,
    format_key,
    format_key_sequence,
    parse_key_sequence,
)
from .state import Mode, Redraw

logger = logging.getLogger(__name__)

DEFAULT_NORMAL_BINDINGS: tuple[tuple[str, str], ...] = (
    ("h", "move-left"),
    ("l", "move-right"),
    ("k", "move-up"),
    ("j", "move-down"),
    ("^", "jump-line-start"),
    ("0", "jump-line-start-absolute"),
    ("$", "jump-line-end"),
    ("H", "jump-top"),
    ("M", "jump-middle"),
    ("L", "jump-bottom"),
    ("i", "insert-mode"),
    ("a", "append"),
    ("I", "insert-line-start"),
    ("A", "append-line-end"),
    ("o", "open-line-below"),
    ("O", "open-line-above"),
    ("D", "delete-to-end-of-line"),
    ("C", "change-to-end-of-line"),
    ("x", "delete-char"),
    ("X", "delete-char-before"),
    ("s", "substitute-char"),
    ("S", "substitute-line"),
    (":", "command-mode"),
)

DEFAULT_PREFIX_BINDINGS: tuple[tuple[str, str], ...] = (
    ("d d", "delete-line"),
    ("C-c", "normal-mode"),
)

DEFAULT_INSERT_BINDINGS: tuple[tuple[str, str], ...] = (
    ("ESC", "normal-mode"),
    ("C-c", "normal-mode"),
)

DEFAULT_COMMAND_BINDINGS: tuple[tuple[str, str], ...] = (
    ("C-c", "normal-mode"),
)

DEFAULT_BINDINGS: dict[Mode, tuple[tuple[str, str], ...]] = {
    Mode.NORMAL: DEFAULT_NORMAL_BINDINGS,
    Mode.NORMAL_PREFIX: DEFAULT_PREFIX_BINDINGS,
    Mode.INSERT: DEFAULT_INSERT_BINDINGS,
    Mode.COMMAND: DEFAULT_COMMAND_BINDINGS,
}

DEFAULT_EX_BINDINGS: tuple[tuple[str, str], ...] = (
    ("w", "write"),
    ("q", "quit"),
    ("wq", "write-quit"),
)


@dataclass(frozen=True)
class KeyResult:
    """Outcome of one keystroke: what to redraw and whether the session ends."""

    redraws: frozenset[Redraw]
    quit: bool = False


class ModalDispatcher:
    """Routes each keystroke to the handler for the editor's current mode."""

    def __init__(self, editor: Editor) -> None:
        self.editor = editor
        self._bind_defaults()

    def feed(self, char: str) -> KeyResult:
        """Process one keystroke and describe what changed."""
        editor = self.editor
        mode_before = editor.mode
        version_before = editor.buffer.version
        cursor_before = (editor.buffer.x, editor.buffer.y)
        message_before = editor.message

        if editor.mode is Mode.INSERT:
            redraws = self._handle_insert(char)
        elif editor.mode is Mode.COMMAND:
            redraws = self._handle_command(char)
        elif editor.mode is Mode.NORMAL_PREFIX:
            redraws = self._handle_prefix(char)
        else:
            redraws = self._handle_normal(char)

        if editor.mode is not mode_before:
            redraws |= {Redraw.STATUS, Redraw.CURSOR}
            if Mode.COMMAND in (mode_before, editor.mode):
                redraws.add(Redraw.COMMAND)
        if editor.buffer.version != version_before:
            redraws.add(Redraw.FULL)
        if (editor.buffer.x, editor.buffer.y) != cursor_before:
            redraws.add(Redraw.CURSOR)
        if editor.message != message_before:
            redraws.add(Redraw.COMMAND)

        return KeyResult(redraws=frozenset(redraws), quit=editor.quit_requested)

    def feed_keys(self, keys: str) -> KeyResult:
        """Feed several keystrokes, merging their redraw requests."""
        redraws: set[Redraw] = set()
        result = KeyResult(redraws=frozenset())
        for char in keys:
            result = self.feed(char)
            redraws |= result.redraws
            if result.quit:
                break
        return KeyResult(redraws=frozenset(redraws), quit=result.quit)

    def _handle_normal(self, char: str) -> set[Redraw]:
        command_name = self.editor.lookup_key(Mode.NORMAL, char)
        if command_name is not None:
            self._run(command_name)
            return {Redraw.CURSOR}

        if self.editor.has_prefix_binding(Mode.NORMAL_PREFIX, char):
            self.editor.enter_normal_prefix(char)
            return {Redraw.STATUS}

        logger.debug("ignoring unbound key %s", format_key(char))
        return set()

    def _handle_prefix(self, char: str) -> set[Redraw]:
        # Single-key bindings act at once, whatever is pending.
        command_name = self.editor.lookup_key(Mode.NORMAL_PREFIX, char)
        if command_name is None:
            self.editor.prefix += char
            command_name = self.editor.lookup_key(Mode.NORMAL_PREFIX, self.editor.prefix)
        if command_name is None:
            logger.debug("pending prefix %s", format_key_sequence(self.editor.prefix))
            return {Redraw.STATUS}

        self._run(command_name)
        self.editor.enter_normal()
        return {Redraw.FULL}

    def _handle_insert(self, char: str) -> set[Redraw]:
        buffer = self.editor.buffer
        command_name = self.editor.lookup_key(Mode.INSERT, char)
        if command_name is not None:
            self._run(command_name)
        elif char == TAB:
            buffer.insert_text(" " * buffer.tab_width)
        elif char in ENTER_KEYS:
            buffer.split_line_at_cursor()
        elif char in BACKSPACE_KEYS:
            buffer.backspace()
        else:
            buffer.insert_character(char)
        return {Redraw.FULL}

    def _handle_command(self, char: str) -> set[Redraw]:
        command_name = self.editor.lookup_key(Mode.COMMAND, char)
        if command_name is not None:
            self._run(command_name)
            return {Redraw.FULL}

        if char in ENTER_KEYS:
            command_name = self.editor.lookup_ex(self.editor.command_line)
            if command_name is None:
                logger.debug("ignoring unknown command %r", self.editor.command_line)
                return set()
            self._run(command_name)
            if not self.editor.quit_requested:
                self.editor.enter_normal()
            return {Redraw.FULL}

        self.editor.command_line += char
        return {Redraw.COMMAND, Redraw.CURSOR}

    def _run(self, command_name: str) -> None:
        try:
            self.editor.run(command_name)
        except OSError as exc:
            logger.exception("command %s failed to write", command_name)
            self.editor.message = f"write failed: {exc}"
        except Exception as exc:
            logger.exception("command %s failed", command_name)
            self.editor.message = f"command error: {exc}"

    def _bind_defaults(self) -> None:
        for mode, bindings in DEFAULT_BINDINGS.items():
            for sequence, command_name in bindings:
                if self.editor.lookup_key(mode, parse_key_sequence(sequence)) is None:
                    self.editor.bind_key(mode, sequence, command_name)
        for text, command_name in DEFAULT_EX_BINDINGS:
            if self.editor.lookup_ex(text) is None:
                self.editor.bind_ex(text, command_name)

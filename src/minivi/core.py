"""Editor core: buffer, mode state machine, command registry and keymaps."""

from __future__ import annotations

import inspect
import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .buffer import TextBuffer
from .keymap import parse_key_sequence
from .state import EditorConfig, EditorSnapshot, Mode

Command = Callable[..., object]
Hook = Callable[..., object]
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandInfo:
    """Command registration metadata."""

    name: str
    fn: Command
    doc: str


class Editor:
    """Single-file modal editing session.

    Owns the text buffer and the mode state machine. Keystrokes are routed by
    :class:`minivi.dispatch.ModalDispatcher`; everything here is usable without
    a terminal.
    """

    def __init__(
        self,
        buffer: TextBuffer | None = None,
        *,
        path: str | Path | None = None,
        config: EditorConfig | None = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.buffer = buffer or TextBuffer(tab_width=self.config.tab_width)
        self.path = Path(path) if path is not None else None
        self.mode = Mode.NORMAL
        self.prefix = ""
        self.command_line = ""
        self.message = ""
        self.quit_requested = False
        self._commands: dict[str, CommandInfo] = {}
        self._keymaps: dict[Mode, dict[str, str]] = defaultdict(dict)
        self._ex_commands: dict[str, str] = {}
        self._hooks: dict[str, list[Hook]] = defaultdict(list)

    @classmethod
    def open(cls, path: str | Path, *, config: EditorConfig | None = None) -> Editor:
        """Load PATH into a new editor. Raises ``OSError`` when it cannot be read."""
        config = config or EditorConfig()
        text = Path(path).read_text(encoding="utf-8")
        buffer = TextBuffer.from_text(text, tab_width=config.tab_width)
        logger.info("opened %s (%d lines)", path, buffer.line_count())
        return cls(buffer, path=path, config=config)

    # commands

    def command(self, name: str, fn: Command) -> None:
        self._commands[name] = CommandInfo(
            name=name,
            fn=fn,
            doc=inspect.getdoc(fn) or "(undocumented command)",
        )

    def get_command_info(self, name: str) -> CommandInfo:
        command = self._commands.get(name)
        if command is None:
            raise KeyError(f"unknown command: {name}")
        return command

    def run(self, name: str, *args: object) -> object:
        info = self.get_command_info(name)
        self.emit("before-command", name, args)
        result = info.fn(self, *args)
        self.emit("after-command", name, args, result)
        return result

    @property
    def commands(self) -> list[str]:
        return sorted(self._commands)

    # keymaps

    def bind_key(self, mode: Mode, sequence: str, command_name: str) -> None:
        """Bind a key sequence (``"h"``, ``"d d"``, ``"C-c"``) in MODE to a command."""
        if command_name not in self._commands:
            raise KeyError(f"unknown command: {command_name}")
        keys = parse_key_sequence(sequence)
        self._keymaps[mode][keys] = command_name

    def bind_ex(self, text: str, command_name: str) -> None:
        """Bind a command-line string such as ``wq`` to a command."""
        if command_name not in self._commands:
            raise KeyError(f"unknown command: {command_name}")
        if not text:
            raise ValueError("empty ex command")
        self._ex_commands[text] = command_name

    def lookup_key(self, mode: Mode, keys: str) -> str | None:
        return self._keymaps.get(mode, {}).get(keys)

    def lookup_ex(self, text: str) -> str | None:
        return self._ex_commands.get(text)

    def has_prefix_binding(self, mode: Mode, keys: str) -> bool:
        for bound in self._keymaps.get(mode, {}):
            if len(bound) > len(keys) and bound.startswith(keys):
                return True
        return False

    # hooks

    def on(self, event: str, fn: Hook) -> None:
        self._hooks[event].append(fn)

    def emit(self, event: str, *args: object) -> None:
        for fn in self._hooks.get(event, []):
            try:
                fn(self, *args)
            except Exception:
                logger.exception("hook failed for event %s", event)

    # mode transitions

    def enter_normal(self) -> None:
        self.prefix = ""
        self.command_line = ""
        self._set_mode(Mode.NORMAL)
        self.buffer.move_left()

    def enter_normal_prefix(self, first: str) -> None:
        self._set_mode(Mode.NORMAL_PREFIX)
        self.prefix = first

    def enter_insert(self) -> None:
        self._set_mode(Mode.INSERT)

    def enter_command(self) -> None:
        self.command_line = ""
        self.message = ""
        self._set_mode(Mode.COMMAND)

    def _set_mode(self, mode: Mode) -> None:
        previous = self.mode
        self.mode = mode
        logger.debug("mode %s -> %s", previous.value, mode.value)
        self.emit("mode-change", previous, mode)

    # file

    def save(self) -> Path:
        """Write the serialized buffer to the session path."""
        if self.path is None:
            raise OSError("no file name")
        self.path.write_text(self.buffer.serialize(), encoding="utf-8")
        self.buffer.dirty = False
        count = self.buffer.line_count()
        self.message = f'"{self.path}" {count}L written'
        logger.info("wrote %s (%d lines)", self.path, count)
        self.emit("after-save", self.path)
        return self.path

    def request_quit(self) -> None:
        self.quit_requested = True

    def snapshot(self) -> EditorSnapshot:
        return EditorSnapshot(
            lines=tuple(self.buffer.lines),
            column=self.buffer.x,
            row=self.buffer.y,
            mode=self.mode,
            prefix=self.prefix,
            command=self.command_line,
            message=self.message,
            config=self.config,
        )

"""Editing session loop tying dispatcher, editor and renderer together."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TextIO

from .commands import register_builtin_commands
from .core import Editor
from .dispatch import KeyResult, ModalDispatcher
from .render import Renderer
from .state import Redraw
from .terminal import Terminal

logger = logging.getLogger(__name__)


def read_keys(stream: TextIO) -> Iterator[str]:
    """Yield one keystroke at a time until the stream is exhausted."""
    while True:
        char = stream.read(1)
        if not char:
            return
        yield char


class Session:
    """One editor bound to a terminal."""

    def __init__(self, editor: Editor, terminal: Terminal) -> None:
        self.editor = editor
        register_builtin_commands(editor)
        self.dispatcher = ModalDispatcher(editor)
        self.renderer = Renderer(terminal)

    def start(self) -> None:
        self.renderer.render(self.editor.snapshot(), (Redraw.FULL,))

    def feed(self, char: str) -> KeyResult:
        result = self.dispatcher.feed(char)
        if not result.quit:
            self.renderer.render(self.editor.snapshot(), result.redraws)
        return result

    def run(self, keys: Iterable[str]) -> int:
        """Process keystrokes until a quit command or end of input.

        Returns the process exit status.
        """
        self.start()
        for char in keys:
            if self.feed(char).quit:
                logger.info("session ended by quit command")
                return 0
        logger.info("input ended, closing session")
        return 0

"""Textual TUI application for minivi."""

from __future__ import annotations

import logging

from rich.style import Style
from rich.text import Text
from textual.app import App, ComposeResult
from textual.events import Key
from textual.widgets import Static

from ..core import Editor
from ..keymap import key_from_textual
from ..session import Session
from ..terminal import GridTerminal

DEFAULT_CURSOR_STYLE = "reverse"
logger = logging.getLogger(__name__)


class EditorView(Static):
    """Focusable surface that receives every keystroke."""

    can_focus = True

    def on_key(self, event: Key) -> None:
        event.stop()
        event.prevent_default()
        app = self.app
        if isinstance(app, MiniviApp):
            app.handle_key(event.key, event.character)


class MiniviApp(App[int], inherit_bindings=False):
    """Full-screen frontend drawing the editor through a character grid."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #editor {
        height: 1fr;
        padding: 0;
    }
    """

    def __init__(self, editor: Editor, *, cursor_style: str = DEFAULT_CURSOR_STYLE) -> None:
        super().__init__()
        self.editor = editor
        config = editor.config
        self.grid = GridTerminal(config.width, config.height)
        self.session = Session(editor, self.grid)
        self.cursor_style = Style.parse(cursor_style)
        self._quit_requested = False

    @property
    def quit_requested(self) -> bool:
        return self._quit_requested

    def compose(self) -> ComposeResult:
        yield EditorView(id="editor")

    def on_mount(self) -> None:
        self.query_one("#editor", EditorView).focus()
        self.session.start()
        self._refresh_view()

    def handle_key(self, key: str, character: str | None) -> None:
        char = key_from_textual(key, character)
        if char is None:
            logger.debug("ignoring key %s", key)
            return

        result = self.session.feed(char)
        if result.quit:
            self._quit_requested = True
            self.exit(0)
            return
        self._refresh_view()

    def _refresh_view(self) -> None:
        self.query_one("#editor", EditorView).update(self.render_grid())

    def render_grid(self) -> Text:
        grid = self.grid
        text = Text("\n".join(grid.lines()), no_wrap=True)
        col, row = grid.cursor
        if 0 <= row < grid.height and 0 <= col < grid.width:
            start = row * (grid.width + 1) + col
            text.stylize(self.cursor_style, start, start + 1)
        return text

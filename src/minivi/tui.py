"""TUI entrypoint."""

from __future__ import annotations

from .core import Editor
from .ui.app import MiniviApp


def run_tui(editor: Editor) -> int:
    app = MiniviApp(editor)
    result = app.run()
    return 0 if result is None else result

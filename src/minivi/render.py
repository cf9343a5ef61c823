"""Screen layout for editor snapshots."""

from __future__ import annotations

from collections.abc import Iterable

from .state import EditorSnapshot, Mode, Redraw
from .terminal import Terminal

STATUS_COLUMN = 1


class Renderer:
    """Turns snapshots and redraw requests into terminal directives.

    Document line ``i`` is drawn at row ``i`` starting from the top; rows that
    do not fit above the status line are not drawn.
    """

    def __init__(self, terminal: Terminal) -> None:
        self.terminal = terminal

    def render(self, snapshot: EditorSnapshot, redraws: Iterable[Redraw] = (Redraw.FULL,)) -> None:
        requested = set(redraws)
        if not requested:
            return

        if Redraw.FULL in requested:
            self._draw_text(snapshot)
            self._draw_status(snapshot)
            self._draw_command(snapshot)
        else:
            if Redraw.STATUS in requested:
                self._draw_status(snapshot)
            if Redraw.COMMAND in requested:
                self._draw_command(snapshot)

        self.terminal.move_cursor(*self.cursor_position(snapshot))
        self.terminal.flush()

    def cursor_position(self, snapshot: EditorSnapshot) -> tuple[int, int]:
        if snapshot.mode is Mode.COMMAND:
            return len(snapshot.command) + 1, snapshot.config.command_row
        return snapshot.column, snapshot.row

    def _draw_text(self, snapshot: EditorSnapshot) -> None:
        self.terminal.clear_screen()
        width = snapshot.config.width
        for row, line in enumerate(snapshot.lines[: snapshot.config.text_rows]):
            self.terminal.move_cursor(0, row)
            self.terminal.write_text(line[:width])

    def _draw_status(self, snapshot: EditorSnapshot) -> None:
        config = snapshot.config
        self.terminal.move_cursor(STATUS_COLUMN, config.status_row)
        self.terminal.write_text(_fit(snapshot.mode_label, config.width - STATUS_COLUMN))

    def _draw_command(self, snapshot: EditorSnapshot) -> None:
        config = snapshot.config
        if snapshot.mode is Mode.COMMAND:
            text = f":{snapshot.command}"
        else:
            text = snapshot.message
        self.terminal.move_cursor(0, config.command_row)
        self.terminal.write_text(_fit(text, config.width - 1))


def _fit(text: str, width: int) -> str:
    return text[:width].ljust(width)

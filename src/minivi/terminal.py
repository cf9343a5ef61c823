"""Terminal collaborators consumed by the renderer."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

CSI = "\x1b["


class Terminal(Protocol):
    """Output directives the renderer issues. Coordinates are 0-based."""

    def clear_screen(self) -> None: ...

    def move_cursor(self, col: int, row: int) -> None: ...

    def write_text(self, text: str) -> None: ...

    def flush(self) -> None: ...


class AnsiTerminal:
    """Writes VT100 escape sequences to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout

    def clear_screen(self) -> None:
        self.stream.write(f"{CSI}2J")

    def move_cursor(self, col: int, row: int) -> None:
        self.stream.write(f"{CSI}{row + 1};{col + 1}H")

    def write_text(self, text: str) -> None:
        self.stream.write(text)

    def flush(self) -> None:
        self.stream.flush()


class GridTerminal:
    """In-memory character grid with a cursor.

    Text written past the right edge is clipped; it never wraps.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.col = 0
        self.row = 0
        self.flushes = 0
        self._cells = [[" "] * width for _ in range(height)]

    def clear_screen(self) -> None:
        self._cells = [[" "] * self.width for _ in range(self.height)]

    def move_cursor(self, col: int, row: int) -> None:
        self.col = col
        self.row = row

    def write_text(self, text: str) -> None:
        if not 0 <= self.row < self.height:
            return
        cells = self._cells[self.row]
        for char in text:
            if 0 <= self.col < self.width:
                cells[self.col] = char
            self.col += 1

    def flush(self) -> None:
        self.flushes += 1

    def line(self, row: int) -> str:
        return "".join(self._cells[row]).rstrip()

    def lines(self) -> list[str]:
        return ["".join(cells) for cells in self._cells]

    @property
    def cursor(self) -> tuple[int, int]:
        return self.col, self.row

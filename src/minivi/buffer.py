"""Line-oriented text buffer with a clamped cursor."""

from __future__ import annotations

from dataclasses import dataclass, field

from .state import DEFAULT_TAB_WIDTH


def parse_lines(text: str) -> list[str]:
    """Split file text into document lines.

    A trailing newline does not produce an extra line, and a trailing carriage
    return is stripped from each line. The result always has at least one line.
    """
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    return lines or [""]


def _last_index(line: str) -> int:
    return max(0, len(line) - 1)


@dataclass
class TextBuffer:
    """Document lines plus cursor state.

    Every operation assumes a non-empty document and a valid cursor, and leaves
    both valid on return. The only exception is ``delete_at_cursor``, which may
    leave the column equal to the line length until the next movement.
    """

    lines: list[str] = field(default_factory=lambda: [""])
    x: int = 0
    y: int = 0
    cling_to_end: bool = False
    tab_width: int = DEFAULT_TAB_WIDTH
    dirty: bool = False
    version: int = 0

    def __post_init__(self) -> None:
        if not self.lines:
            self.lines = [""]
        self.y = max(0, min(self.y, len(self.lines) - 1))
        self._clamp_column()

    @classmethod
    def from_text(cls, text: str, *, tab_width: int = DEFAULT_TAB_WIDTH) -> TextBuffer:
        return cls(lines=parse_lines(text), tab_width=tab_width)

    # accessors

    @property
    def column(self) -> int:
        return self.x

    @property
    def row(self) -> int:
        return self.y

    def line_count(self) -> int:
        return len(self.lines)

    def current_line(self) -> str:
        return self.lines[self.y]

    def serialize(self) -> str:
        """Join lines with a newline after every line, including the last."""
        return "".join(f"{line}\n" for line in self.lines)

    # movement

    def move_left(self) -> None:
        self.cling_to_end = False
        self.x = min(max(0, self.x - 1), _last_index(self.current_line()))

    def move_right(self) -> None:
        self.cling_to_end = False
        self.x = min(self.x + 1, _last_index(self.current_line()))

    def move_up(self) -> None:
        self.y = max(0, self.y - 1)
        self._clamp_column()

    def move_down(self) -> None:
        self.y = min(self.y + 1, len(self.lines) - 1)
        self._clamp_column()

    def jump_line_start(self) -> None:
        """Move to the first non-space character.

        On an empty or all-space line the column becomes the line length.
        """
        self.cling_to_end = False
        line = self.current_line()
        self.x = len(line) - len(line.lstrip(" "))

    def jump_line_start_absolute(self) -> None:
        self.cling_to_end = False
        self.x = 0

    def jump_line_end(self) -> None:
        self.x = _last_index(self.current_line())
        self.cling_to_end = True

    def jump_top(self) -> None:
        self.y = 0
        self._clamp_column()

    def jump_middle(self) -> None:
        self.y = len(self.lines) // 2
        self._clamp_column()

    def jump_bottom(self) -> None:
        self.y = len(self.lines) - 1
        self._clamp_column()

    def advance_column(self, count: int = 1) -> None:
        """Move the insertion point right, stopping just past the last character."""
        self.x = min(self.x + count, len(self.current_line()))

    def retreat_column(self, count: int = 1) -> None:
        self.x = max(0, self.x - count)

    def set_cursor(self, column: int, row: int) -> None:
        self.y = max(0, min(row, len(self.lines) - 1))
        self.x = max(0, min(column, len(self.current_line())))

    # mutation

    def insert_character(self, char: str) -> None:
        self.insert_text(char)

    def insert_text(self, text: str) -> None:
        line = self.current_line()
        self._set_line(self.y, line[: self.x] + text + line[self.x :])
        self.x += len(text)

    def backspace(self) -> None:
        """Delete left of the cursor, back to the previous tab stop in indentation."""
        if self.x == 0:
            return

        line = self.current_line()
        if line[: self.x].strip(" "):
            start = self.x - 1
        else:
            start = self.x - (self.x % self.tab_width or self.tab_width)

        self._set_line(self.y, line[:start] + line[self.x :])
        self.x = start

    def delete_at_cursor(self) -> None:
        line = self.current_line()
        if self.x >= len(line):
            return
        self._set_line(self.y, line[: self.x] + line[self.x + 1 :])

    def delete_to_end_of_line(self) -> None:
        self._set_line(self.y, self.current_line()[: self.x])
        if self.x > 0:
            self.x -= 1

    def insert_line_at(self, index: int) -> None:
        index = max(0, min(index, len(self.lines)))
        self.lines.insert(index, "")
        self._touch()

    def split_line_at_cursor(self) -> None:
        line = self.current_line()
        self.lines[self.y] = line[: self.x]
        self.lines.insert(self.y + 1, line[self.x :])
        self._touch()
        self.y += 1
        self.x = 0

    def delete_line(self) -> None:
        del self.lines[self.y]
        if not self.lines:
            self.lines.append("")
        self._touch()
        self.y = min(self.y, len(self.lines) - 1)
        self._clamp_column()

    # helpers

    def _set_line(self, index: int, text: str) -> None:
        self.lines[index] = text
        self._touch()

    def _clamp_column(self) -> None:
        last = _last_index(self.current_line())
        if self.cling_to_end:
            self.x = last
        else:
            self.x = max(0, min(self.x, last))

    def _touch(self) -> None:
        self.dirty = True
        self.version += 1

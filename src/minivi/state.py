"""Mode, configuration and snapshot types for minivi."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24
DEFAULT_TAB_WIDTH = 4
MIN_HEIGHT = 3


class Mode(Enum):
    """Editor input modes."""

    NORMAL = "normal"
    NORMAL_PREFIX = "normal-prefix"
    INSERT = "insert"
    COMMAND = "command"


MODE_LABELS: dict[Mode, str] = {
    Mode.NORMAL: "NORMAL ",
    Mode.NORMAL_PREFIX: "NORMAL ",
    Mode.INSERT: "INSERT ",
    Mode.COMMAND: "COMMAND",
}


@dataclass(frozen=True)
class EditorConfig:
    """Session configuration supplied at startup."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    tab_width: int = DEFAULT_TAB_WIDTH

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError(f"width must be positive: {self.width}")
        if self.height < MIN_HEIGHT:
            raise ValueError(f"height must be at least {MIN_HEIGHT}: {self.height}")
        if self.tab_width < 1:
            raise ValueError(f"tab width must be positive: {self.tab_width}")

    @property
    def status_row(self) -> int:
        return self.height - 2

    @property
    def command_row(self) -> int:
        return self.height - 1

    @property
    def text_rows(self) -> int:
        return self.height - 2


@dataclass(frozen=True)
class EditorSnapshot:
    """Immutable editor state for rendering."""

    lines: tuple[str, ...]
    column: int
    row: int
    mode: Mode
    prefix: str
    command: str
    message: str
    config: EditorConfig

    @property
    def mode_label(self) -> str:
        label = MODE_LABELS[self.mode]
        if self.mode is Mode.NORMAL_PREFIX:
            return f"{label}{self.prefix}"
        return label


class Redraw(Enum):
    """Screen regions a keystroke asks the renderer to refresh."""

    FULL = "full"
    STATUS = "status"
    COMMAND = "command"
    CURSOR = "cursor"

from pathlib import Path

import pytest

from minivi.buffer import TextBuffer
from minivi.commands import register_builtin_commands
from minivi.core import Editor
from minivi.dispatch import ModalDispatcher
from minivi.state import Mode, Redraw


def _new_dispatcher(*lines: str, x: int = 0, y: int = 0, path: Path | None = None) -> ModalDispatcher:
    buffer = TextBuffer(lines=list(lines))
    buffer.set_cursor(x, y)
    editor = Editor(buffer, path=path)
    register_builtin_commands(editor)
    return ModalDispatcher(editor)


def _state(dispatcher: ModalDispatcher) -> tuple[list[str], int, int, Mode]:
    editor = dispatcher.editor
    return editor.buffer.lines, editor.buffer.column, editor.buffer.row, editor.mode


def test_normal_motions() -> None:
    dispatcher = _new_dispatcher("abc", "   defg", "hi")

    dispatcher.feed_keys("ll")
    assert dispatcher.editor.buffer.column == 2

    dispatcher.feed_keys("j^")
    assert (dispatcher.editor.buffer.column, dispatcher.editor.buffer.row) == (3, 1)

    dispatcher.feed_keys("$")
    assert dispatcher.editor.buffer.column == 6
    dispatcher.feed_keys("j")
    assert dispatcher.editor.buffer.column == 1

    dispatcher.feed_keys("0H")
    assert (dispatcher.editor.buffer.column, dispatcher.editor.buffer.row) == (0, 0)
    dispatcher.feed_keys("M")
    assert dispatcher.editor.buffer.row == 1
    dispatcher.feed_keys("L")
    assert dispatcher.editor.buffer.row == 2
    dispatcher.feed_keys("kh")
    assert dispatcher.editor.buffer.row == 1


def test_append_at_line_end_then_escape() -> None:
    dispatcher = _new_dispatcher("abc", "def")

    dispatcher.feed_keys("llA")
    assert dispatcher.editor.buffer.column == 3
    assert dispatcher.editor.mode is Mode.INSERT

    dispatcher.feed("X")
    assert dispatcher.editor.buffer.lines == ["abcX", "def"]
    assert dispatcher.editor.buffer.column == 4

    dispatcher.feed("\x1b")
    assert _state(dispatcher) == (["abcX", "def"], 3, 0, Mode.NORMAL)


def test_insert_mode_keys() -> None:
    dispatcher = _new_dispatcher("abc")

    dispatcher.feed_keys("i\tZ")
    assert dispatcher.editor.buffer.lines == ["    Zabc"]

    dispatcher.feed_keys("\x7f\x7f")
    assert dispatcher.editor.buffer.lines == ["abc"]
    assert dispatcher.editor.buffer.column == 0

    dispatcher.feed_keys("ab\r")
    assert dispatcher.editor.buffer.lines == ["ab", "abc"]
    assert (dispatcher.editor.buffer.column, dispatcher.editor.buffer.row) == (0, 1)

    dispatcher.feed("\x03")
    assert dispatcher.editor.mode is Mode.NORMAL


def test_insert_keystrokes_request_full_redraw() -> None:
    dispatcher = _new_dispatcher("abc")

    result = dispatcher.feed("i")
    assert Redraw.STATUS in result.redraws
    assert Redraw.CURSOR in result.redraws

    result = dispatcher.feed("q")
    assert Redraw.FULL in result.redraws
    assert not result.quit


def test_unknown_normal_key_is_ignored() -> None:
    dispatcher = _new_dispatcher("abc")

    result = dispatcher.feed("z")
    assert result.redraws == frozenset()
    assert _state(dispatcher) == (["abc"], 0, 0, Mode.NORMAL)


def test_append_and_insert_at_line_start() -> None:
    dispatcher = _new_dispatcher("abc", "  xy")

    dispatcher.feed_keys("aZ\x1b")
    assert dispatcher.editor.buffer.lines[0] == "aZbc"

    dispatcher.feed_keys("jI-\x1b")
    assert dispatcher.editor.buffer.lines[1] == "  -xy"


def test_append_on_empty_line_stays_in_bounds() -> None:
    dispatcher = _new_dispatcher("")

    dispatcher.feed_keys("Aok")
    assert dispatcher.editor.buffer.lines == ["ok"]

    dispatcher.feed("\x1b")
    dispatcher.feed_keys("0aX")
    assert dispatcher.editor.buffer.lines == ["oXk"]


def test_open_line_below_and_above() -> None:
    dispatcher = _new_dispatcher("one", "two", x=2)

    dispatcher.feed_keys("oA\x1b")
    assert dispatcher.editor.buffer.lines == ["one", "A", "two"]

    dispatcher.feed_keys("OB\x1b")
    assert dispatcher.editor.buffer.lines == ["one", "B", "A", "two"]
    assert dispatcher.editor.buffer.row == 1


def test_delete_and_change_to_end_of_line() -> None:
    dispatcher = _new_dispatcher("abcdef", "ghijkl", x=2)

    dispatcher.feed("D")
    assert dispatcher.editor.buffer.lines[0] == "ab"
    assert dispatcher.editor.buffer.column == 1

    dispatcher.feed_keys("jlC")
    assert dispatcher.editor.buffer.lines[1] == "gh"
    assert dispatcher.editor.mode is Mode.INSERT
    dispatcher.feed_keys("XY\x1b")
    assert dispatcher.editor.buffer.lines[1] == "ghXY"


def test_change_from_line_start_clears_line() -> None:
    dispatcher = _new_dispatcher("abc")
    dispatcher.feed_keys("Cz")
    assert dispatcher.editor.buffer.lines == ["z"]


def test_character_deletes() -> None:
    dispatcher = _new_dispatcher("abcdef", x=2)

    dispatcher.feed("x")
    assert dispatcher.editor.buffer.lines == ["abdef"]

    dispatcher.feed("X")
    assert dispatcher.editor.buffer.lines == ["adef"]
    assert dispatcher.editor.buffer.column == 1

    dispatcher.feed_keys("sQ\x1b")
    assert dispatcher.editor.buffer.lines == ["aQef"]

    dispatcher.feed_keys("0X")
    assert dispatcher.editor.buffer.lines == ["Qef"]


def test_substitute_line() -> None:
    dispatcher = _new_dispatcher("abc", "def", x=1)
    dispatcher.feed_keys("Snew\x1b")
    assert dispatcher.editor.buffer.lines == ["new", "def"]


def test_delete_line_prefix() -> None:
    dispatcher = _new_dispatcher("one", "two", "three", y=1)

    result = dispatcher.feed("d")
    assert dispatcher.editor.mode is Mode.NORMAL_PREFIX
    assert dispatcher.editor.prefix == "d"
    assert Redraw.STATUS in result.redraws

    result = dispatcher.feed("d")
    assert Redraw.FULL in result.redraws
    assert _state(dispatcher) == (["one", "three"], 0, 1, Mode.NORMAL)
    assert dispatcher.editor.buffer.current_line() == "three"


def test_delete_only_line_leaves_empty_document() -> None:
    dispatcher = _new_dispatcher("solo", x=3)
    dispatcher.feed_keys("dd")
    assert _state(dispatcher) == ([""], 0, 0, Mode.NORMAL)


def test_delete_last_line_clamps_row() -> None:
    dispatcher = _new_dispatcher("one", "two", y=1)
    dispatcher.feed_keys("dd")
    assert dispatcher.editor.buffer.lines == ["one"]
    assert dispatcher.editor.buffer.row == 0


def test_prefix_cancel_and_unmatched_prefix() -> None:
    dispatcher = _new_dispatcher("one", "two")

    dispatcher.feed_keys("d\x03")
    assert _state(dispatcher) == (["one", "two"], 0, 0, Mode.NORMAL)
    assert dispatcher.editor.prefix == ""

    dispatcher.feed_keys("dxd")
    assert dispatcher.editor.mode is Mode.NORMAL_PREFIX
    assert dispatcher.editor.prefix == "dxd"
    assert dispatcher.editor.buffer.lines == ["one", "two"]


def test_command_line_typing_and_cancel() -> None:
    dispatcher = _new_dispatcher("abc")

    result = dispatcher.feed(":")
    assert dispatcher.editor.mode is Mode.COMMAND
    assert Redraw.COMMAND in result.redraws

    result = dispatcher.feed("w")
    assert dispatcher.editor.command_line == "w"
    assert result.redraws == {Redraw.COMMAND, Redraw.CURSOR}

    dispatcher.feed("\x03")
    assert dispatcher.editor.mode is Mode.NORMAL
    assert dispatcher.editor.command_line == ""


def test_unknown_command_line_is_kept() -> None:
    dispatcher = _new_dispatcher("abc")

    result = dispatcher.feed_keys(":x\r")
    assert not result.quit
    assert dispatcher.editor.mode is Mode.COMMAND
    assert dispatcher.editor.command_line == "x"


def test_write_returns_to_normal(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    dispatcher = _new_dispatcher("abc", path=path)

    result = dispatcher.feed_keys("iZ\x1b:w\r")
    assert not result.quit
    assert path.read_text(encoding="utf-8") == "Zabc\n"
    assert dispatcher.editor.mode is Mode.NORMAL
    assert "written" in dispatcher.editor.message


def test_quit_without_saving(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    dispatcher = _new_dispatcher("abc", path=path)

    result = dispatcher.feed_keys("x:q\r")
    assert result.quit
    assert not path.exists()


def test_write_quit_saves_once_then_quits(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    dispatcher = _new_dispatcher("abc", "def", path=path)
    saves: list[Path] = []
    dispatcher.editor.on("after-save", lambda _ed, target: saves.append(target))

    result = dispatcher.feed_keys("x:wq\n")
    assert result.quit
    assert saves == [path]
    assert path.read_text(encoding="utf-8") == "bc\ndef\n"


def test_write_failure_is_reported_not_fatal(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "missing-dir" / "out.txt"
    dispatcher = _new_dispatcher("abc", path=path)

    with caplog.at_level("ERROR"):
        result = dispatcher.feed_keys(":wq\r")

    assert not result.quit
    assert dispatcher.editor.message.startswith("write failed:")
    assert dispatcher.editor.mode is Mode.NORMAL
    assert "command write-quit failed to write" in caplog.text


def test_failing_command_does_not_escape_keystroke(caplog: pytest.LogCaptureFixture) -> None:
    dispatcher = _new_dispatcher("abc")

    def explode(_ed: Editor) -> None:
        raise RuntimeError("boom")

    dispatcher.editor.command("explode", explode)
    dispatcher.editor.bind_key(Mode.NORMAL, "z", "explode")

    with caplog.at_level("ERROR"):
        result = dispatcher.feed("z")

    assert dispatcher.editor.message == "command error: boom"
    assert Redraw.COMMAND in result.redraws
    assert "command explode failed" in caplog.text


def test_custom_bindings_survive_defaults() -> None:
    buffer = TextBuffer(lines=["abc"])
    editor = Editor(buffer)
    register_builtin_commands(editor)
    editor.bind_key(Mode.NORMAL, "h", "move-right")

    dispatcher = ModalDispatcher(editor)
    dispatcher.feed("h")
    assert editor.buffer.column == 1


def test_cancel_keys_are_keymap_bindings() -> None:
    editor = _new_dispatcher("abc").editor

    for mode in (Mode.NORMAL_PREFIX, Mode.INSERT, Mode.COMMAND):
        assert editor.lookup_key(mode, "\x03") == "normal-mode"
    assert editor.lookup_key(Mode.INSERT, "\x1b") == "normal-mode"
    assert editor.lookup_key(Mode.COMMAND, "\x1b") is None


def test_insert_escape_can_be_rebound() -> None:
    editor = Editor(TextBuffer(lines=["abc"]))
    register_builtin_commands(editor)
    editor.bind_key(Mode.INSERT, "ESC", "command-mode")

    dispatcher = ModalDispatcher(editor)
    dispatcher.feed_keys("i\x1b")
    assert editor.mode is Mode.COMMAND
    assert editor.buffer.lines == ["abc"]

"""Built-in cursor motion commands."""

from __future__ import annotations

from ..core import Editor


def register_motion_commands(editor: Editor) -> None:
    """Register cursor movement and jump commands."""

    def move_left(ed: Editor) -> None:
        """Move one column left."""
        ed.buffer.move_left()

    def move_right(ed: Editor) -> None:
        """Move one column right."""
        ed.buffer.move_right()

    def move_up(ed: Editor) -> None:
        """Move one row up, re-clamping the column."""
        ed.buffer.move_up()

    def move_down(ed: Editor) -> None:
        """Move one row down, re-clamping the column."""
        ed.buffer.move_down()

    def jump_line_start(ed: Editor) -> None:
        """Move to the first non-space character of the line."""
        ed.buffer.jump_line_start()

    def jump_line_start_absolute(ed: Editor) -> None:
        """Move to column 0."""
        ed.buffer.jump_line_start_absolute()

    def jump_line_end(ed: Editor) -> None:
        """Move to the last character and stay there across row changes."""
        ed.buffer.jump_line_end()

    def jump_top(ed: Editor) -> None:
        """Move to the first line."""
        ed.buffer.jump_top()

    def jump_middle(ed: Editor) -> None:
        """Move to the middle line."""
        ed.buffer.jump_middle()

    def jump_bottom(ed: Editor) -> None:
        """Move to the last line."""
        ed.buffer.jump_bottom()

    editor.command("move-left", move_left)
    editor.command("move-right", move_right)
    editor.command("move-up", move_up)
    editor.command("move-down", move_down)
    editor.command("jump-line-start", jump_line_start)
    editor.command("jump-line-start-absolute", jump_line_start_absolute)
    editor.command("jump-line-end", jump_line_end)
    editor.command("jump-top", jump_top)
    editor.command("jump-middle", jump_middle)
    editor.command("jump-bottom", jump_bottom)

"""Built-in editing and mode-entry commands."""

from __future__ import annotations

from ..core import Editor


def register_editing_commands(editor: Editor) -> None:
    """Register Normal-mode editing commands."""

    def insert_mode(ed: Editor) -> None:
        """Enter Insert mode at the cursor."""
        ed.enter_insert()

    def append(ed: Editor) -> None:
        """Enter Insert mode after the cursor."""
        ed.buffer.advance_column()
        ed.enter_insert()

    def insert_line_start(ed: Editor) -> None:
        """Enter Insert mode before the first non-space character."""
        ed.buffer.jump_line_start()
        ed.enter_insert()

    def append_line_end(ed: Editor) -> None:
        """Enter Insert mode after the last character."""
        ed.buffer.jump_line_end()
        ed.buffer.advance_column()
        ed.enter_insert()

    def open_line_below(ed: Editor) -> None:
        """Open an empty line below and enter Insert mode on it."""
        buf = ed.buffer
        buf.insert_line_at(buf.y + 1)
        buf.set_cursor(0, buf.y + 1)
        ed.enter_insert()

    def open_line_above(ed: Editor) -> None:
        """Open an empty line above and enter Insert mode on it."""
        buf = ed.buffer
        buf.insert_line_at(buf.y)
        buf.set_cursor(0, buf.y)
        ed.enter_insert()

    def delete_to_end_of_line(ed: Editor) -> None:
        """Delete from the cursor to the end of the line."""
        ed.buffer.delete_to_end_of_line()

    def change_to_end_of_line(ed: Editor) -> None:
        """Delete to the end of the line and enter Insert mode there."""
        buf = ed.buffer
        buf.delete_to_end_of_line()
        if buf.x > 0:
            buf.advance_column()
        ed.enter_insert()

    def delete_char(ed: Editor) -> None:
        """Delete the character under the cursor."""
        ed.buffer.delete_at_cursor()

    def delete_char_before(ed: Editor) -> None:
        """Delete the character left of the cursor."""
        ed.buffer.retreat_column()
        ed.buffer.delete_at_cursor()

    def substitute_char(ed: Editor) -> None:
        """Delete the character under the cursor and enter Insert mode."""
        ed.buffer.delete_at_cursor()
        ed.enter_insert()

    def substitute_line(ed: Editor) -> None:
        """Clear the line and enter Insert mode."""
        ed.buffer.jump_line_start_absolute()
        ed.buffer.delete_to_end_of_line()
        ed.enter_insert()

    def delete_line(ed: Editor) -> None:
        """Delete the current line."""
        ed.buffer.delete_line()

    def command_mode(ed: Editor) -> None:
        """Open the command line."""
        ed.enter_command()

    def normal_mode(ed: Editor) -> None:
        """Return to Normal mode, dropping any pending prefix or command line."""
        ed.enter_normal()

    editor.command("insert-mode", insert_mode)
    editor.command("append", append)
    editor.command("insert-line-start", insert_line_start)
    editor.command("append-line-end", append_line_end)
    editor.command("open-line-below", open_line_below)
    editor.command("open-line-above", open_line_above)
    editor.command("delete-to-end-of-line", delete_to_end_of_line)
    editor.command("change-to-end-of-line", change_to_end_of_line)
    editor.command("delete-char", delete_char)
    editor.command("delete-char-before", delete_char_before)
    editor.command("substitute-char", substitute_char)
    editor.command("substitute-line", substitute_line)
    editor.command("delete-line", delete_line)
    editor.command("command-mode", command_mode)
    editor.command("normal-mode", normal_mode)

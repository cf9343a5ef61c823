"""Built-in command-line (ex) commands."""

from __future__ import annotations

from ..core import Editor


def register_ex_commands(editor: Editor) -> None:
    """Register the write and quit commands."""

    def write(ed: Editor) -> str:
        """Save the buffer to its file."""
        path = ed.save()
        return str(path)

    def quit_session(ed: Editor) -> None:
        """End the session without saving."""
        ed.request_quit()

    def write_quit(ed: Editor) -> None:
        """Save the buffer, then end the session."""
        ed.save()
        ed.request_quit()

    editor.command("write", write)
    editor.command("quit", quit_session)
    editor.command("write-quit", write_quit)

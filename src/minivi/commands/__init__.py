"""Built-in command registration entrypoint."""

from __future__ import annotations

from ..core import Editor
from .editing import register_editing_commands
from .ex import register_ex_commands
from .motion import register_motion_commands

__all__ = [
    "register_builtin_commands",
    "register_editing_commands",
    "register_ex_commands",
    "register_motion_commands",
]


def register_builtin_commands(editor: Editor) -> None:
    """Register all built-in commands on an editor instance."""
    register_motion_commands(editor)
    register_editing_commands(editor)
    register_ex_commands(editor)

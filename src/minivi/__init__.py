"""minivi package."""

import logging

__all__ = [
    "CommandInfo",
    "Editor",
    "EditorConfig",
    "KeyResult",
    "ModalDispatcher",
    "Mode",
    "TextBuffer",
]
__version__ = "0.1.0"

from .buffer import TextBuffer
from .core import CommandInfo, Editor
from .dispatch import KeyResult, ModalDispatcher
from .state import EditorConfig, Mode

logging.getLogger(__name__).addHandler(logging.NullHandler())

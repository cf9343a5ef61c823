"""Text UI layer for minivi."""

from .app import EditorView, MiniviApp

__all__ = ["EditorView", "MiniviApp"]

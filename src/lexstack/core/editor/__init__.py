"""Editor command interface and adapters."""
from __future__ import annotations

from .commands import EditorCommands
from .scintilla import MessageEditor

__all__ = ["EditorCommands", "MessageEditor"]

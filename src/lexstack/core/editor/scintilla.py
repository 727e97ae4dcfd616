"""Scintilla message adapter.

Maps :class:`~lexstack.core.editor.commands.EditorCommands` onto Scintilla
messages sent through a host-supplied ``send_message(message, wparam,
lparam)`` callable (e.g. a binding's ``SendScintilla``). String arguments are
passed as ``bytes``; the binding is responsible for marshalling them.

Comment tokens have no Scintilla message; they are editor-side state and are
kept on the adapter for the host's comment/uncomment commands.
"""
from __future__ import annotations

from typing import Any, Callable, Optional, Tuple

SCI_SETLEXER = 4001
SCI_SETPROPERTY = 4004
SCI_SETKEYWORDS = 4005
SCI_SETLEXERLANGUAGE = 4006
SCI_LOADLEXERLIBRARY = 4007
SCI_ALLOCATESUBSTYLES = 4020
SCI_FREESUBSTYLES = 4023
SCI_SETIDENTIFIERS = 4024

SendMessage = Callable[[int, Any, Any], Any]


def _encode(text: str, encoding: str) -> bytes:
    return text.encode(encoding)


class MessageEditor:
    """EditorCommands implementation on top of a Scintilla message sender."""

    def __init__(self, send_message: SendMessage, *, encoding: str = "utf-8") -> None:
        self._send = send_message
        self._encoding = encoding
        self.comment_line_token: Optional[str] = None
        self.comment_block_tokens: Optional[Tuple[str, str]] = None

    def send_message(self, message: int, wparam: Any = 0, lparam: Any = 0) -> Any:
        return self._send(message, wparam, lparam)

    def free_substyles(self) -> None:
        self.send_message(SCI_FREESUBSTYLES)

    def set_lexer(self, lexer_id: int) -> None:
        self.send_message(SCI_SETLEXER, int(lexer_id), 0)

    def set_lexer_language(self, name: str) -> None:
        self.send_message(SCI_SETLEXERLANGUAGE, 0, _encode(name, self._encoding))

    def set_property(self, name: str, value: str) -> None:
        self.send_message(
            SCI_SETPROPERTY, _encode(name, self._encoding), _encode(value, self._encoding)
        )

    def set_keywords(self, index: int, words: str) -> None:
        self.send_message(SCI_SETKEYWORDS, int(index), _encode(words, self._encoding))

    def allocate_substyles(self, style_class: int, count: int) -> int:
        # Scintilla answers -1 when the lexer has no room for sub-styles.
        return int(self.send_message(SCI_ALLOCATESUBSTYLES, int(style_class), int(count)))

    def set_identifiers(self, substyle: int, identifiers: str) -> None:
        self.send_message(SCI_SETIDENTIFIERS, int(substyle), _encode(identifiers, self._encoding))

    def set_comment_line_token(self, token: str) -> None:
        self.comment_line_token = token

    def set_comment_block_tokens(self, start: str, end: str) -> None:
        self.comment_block_tokens = (start, end)

    def load_lexer_library(self, path: str) -> None:
        self.send_message(SCI_LOADLEXERLIBRARY, 0, _encode(str(path), self._encoding))


__all__ = [
    "MessageEditor",
    "SendMessage",
    "SCI_SETLEXER",
    "SCI_SETPROPERTY",
    "SCI_SETKEYWORDS",
    "SCI_SETLEXERLANGUAGE",
    "SCI_LOADLEXERLIBRARY",
    "SCI_ALLOCATESUBSTYLES",
    "SCI_FREESUBSTYLES",
    "SCI_SETIDENTIFIERS",
]

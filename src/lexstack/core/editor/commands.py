"""Command interface of the editing component configured by lexstack."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EditorCommands(Protocol):
    """Discrete commands lexstack issues to an editor instance.

    Implementations keep their own state; lexstack never reads it back except
    for the start id returned by :meth:`allocate_substyles`.
    """

    def free_substyles(self) -> None:
        """Discard every sub-style allocated so far."""
        ...

    def set_lexer(self, lexer_id: int) -> None: ...

    def set_lexer_language(self, name: str) -> None: ...

    def set_property(self, name: str, value: str) -> None: ...

    def set_keywords(self, index: int, words: str) -> None: ...

    def allocate_substyles(self, style_class: int, count: int) -> int:
        """Allocate ``count`` contiguous sub-styles of ``style_class``.

        Returns:
            The first allocated sub-style id.
        """
        ...

    def set_identifiers(self, substyle: int, identifiers: str) -> None: ...

    def set_comment_line_token(self, token: str) -> None: ...

    def set_comment_block_tokens(self, start: str, end: str) -> None: ...

    def load_lexer_library(self, path: str) -> None: ...


__all__ = ["EditorCommands"]

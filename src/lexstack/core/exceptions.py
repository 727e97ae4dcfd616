from __future__ import annotations

from typing import Any, Dict, Mapping


class LexstackError(Exception):
    """Base exception for lexstack."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": {k: str(v) for k, v in self.context.items()},
        }


class DefinitionError(LexstackError, ValueError):
    """Raised when a document parses but does not have the required shape."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        LexstackError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class LanguageDefinitionError(DefinitionError):
    """Raised for a corrupt per-language document."""


class CatalogDefinitionError(DefinitionError):
    """Raised for a corrupt languages catalog document."""


class SettingsError(DefinitionError):
    """Raised when lexstack settings are invalid."""


__all__ = [
    "LexstackError",
    "DefinitionError",
    "LanguageDefinitionError",
    "CatalogDefinitionError",
    "SettingsError",
]

"""Language catalog and per-language lexer/style resolution."""
from __future__ import annotations

from .catalog import LanguageCatalog, LanguageCatalogEntry
from .lexers import load_external_lexers
from .resolver import LanguageStyleResolver, apply_language
from .spec import (
    CommentSpec,
    LanguageSpec,
    LexerById,
    LexerByName,
    parse_language_spec,
)

__all__ = [
    "LanguageCatalog",
    "LanguageCatalogEntry",
    "LanguageStyleResolver",
    "apply_language",
    "load_external_lexers",
    "CommentSpec",
    "LanguageSpec",
    "LexerById",
    "LexerByName",
    "parse_language_spec",
]

"""Per-language document model.

A language document (``<layer>/<app>/languages/<id>.yaml``) looks like::

    lexer: cpp                    # int if built into the editor, name otherwise
    properties:
      fold: "1"
    keywords:
      0: "int char return"
    identifiers:                  # style class -> identifiers, one per sub-style
      11: ["std::string", "std::vector"]
    comments:
      line: "//"
      block: ["/*", "*/"]
    styles:                       # style class -> visual style id
      0: 10
    substyles:                    # style class -> visual style ids, aligned
      11: [50, 51]                #   with identifiers[11]

Sub-styles are allocated contiguously, which is why identifiers and
substyles are sequences rather than maps: the n-th identifier string and the
n-th substyle style id both belong to sub-style ``start + n``.

Documents are parsed once into :class:`LanguageSpec`. Shape problems raise
:class:`~lexstack.core.exceptions.LanguageDefinitionError`; the few
tolerated oddities (non-sequence identifier/substyle groups, malformed
comment blocks, empty sections) are dropped here.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from lexstack.core.exceptions import LanguageDefinitionError
from lexstack.core.schemas import validate_payload

_INT_RE = re.compile(r"[-+]?\d+")


@dataclass(frozen=True)
class LexerById:
    lexer_id: int


@dataclass(frozen=True)
class LexerByName:
    name: str


LexerSelector = Union[LexerById, LexerByName]


@dataclass(frozen=True)
class CommentSpec:
    line: Optional[str] = None
    block: Optional[Tuple[str, str]] = None


@dataclass(frozen=True)
class LanguageSpec:
    lexer: LexerSelector
    properties: Dict[str, str] = field(default_factory=dict)
    keywords: Dict[int, str] = field(default_factory=dict)
    identifiers: Dict[int, Tuple[str, ...]] = field(default_factory=dict)
    comments: Optional[CommentSpec] = None
    styles: Dict[int, int] = field(default_factory=dict)
    substyles: Dict[int, Tuple[int, ...]] = field(default_factory=dict)


class _Parser:
    def __init__(self, source: Optional[Path]) -> None:
        self.source = source

    def fail(self, message: str, **context: Any) -> LanguageDefinitionError:
        if self.source is not None:
            context["path"] = self.source
            message = f"{self.source}: {message}"
        return LanguageDefinitionError(message, context=context)

    def as_int(self, value: Any, where: str) -> int:
        if isinstance(value, bool):
            raise self.fail(f"{where}: expected an integer, got {value!r}")
        if isinstance(value, int):
            return value
        if isinstance(value, str) and _INT_RE.fullmatch(value.strip()):
            return int(value)
        raise self.fail(f"{where}: expected an integer, got {value!r}")

    def as_text(self, value: Any, where: str) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, int, float)):
            return str(value)
        raise self.fail(f"{where}: expected a scalar, got {type(value).__name__}")

    def section(self, doc: Mapping[str, Any], key: str) -> Mapping[Any, Any]:
        value = doc.get(key)
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise self.fail(f"'{key}' must be a mapping")
        return value

    def groups(self, doc: Mapping[str, Any], key: str) -> Mapping[Any, Any]:
        """Like :meth:`section`, but a non-mapping value is ignored."""
        value = doc.get(key)
        return value if isinstance(value, Mapping) else {}

    def lexer(self, value: Any) -> LexerSelector:
        if isinstance(value, bool):
            raise self.fail(f"'lexer' must be an integer or a name, got {value!r}")
        if isinstance(value, int):
            return LexerById(value)
        if isinstance(value, str):
            text = value.strip()
            if _INT_RE.fullmatch(text):
                return LexerById(int(text))
            if text:
                return LexerByName(text)
        raise self.fail(f"'lexer' must be an integer or a name, got {value!r}")

    def comments(self, value: Any) -> Optional[CommentSpec]:
        if value is None:
            return None
        if not isinstance(value, Mapping):
            raise self.fail("'comments' must be a mapping")
        line = value.get("line")
        if line is not None:
            line = self.as_text(line, "comments.line")
        block = value.get("block")
        pair: Optional[Tuple[str, str]] = None
        if isinstance(block, (list, tuple)) and len(block) == 2:
            pair = (
                self.as_text(block[0], "comments.block[0]"),
                self.as_text(block[1], "comments.block[1]"),
            )
        return CommentSpec(line=line, block=pair)


def parse_language_spec(data: Any, *, source: Optional[Path] = None) -> LanguageSpec:
    """Parse a loaded language document.

    Args:
        data: The YAML document (``None`` for an empty file).
        source: Document path, used in error messages.

    Raises:
        LanguageDefinitionError: ``lexer`` missing or unusable, or a section
            has the wrong shape.
    """
    parser = _Parser(source)
    context: Dict[str, Any] = {"path": source} if source is not None else {}
    validate_payload(data, "language", error_cls=LanguageDefinitionError, context=context)

    properties = {
        parser.as_text(name, "properties"): parser.as_text(value, f"properties.{name}")
        for name, value in parser.section(data, "properties").items()
    }
    keywords = {
        parser.as_int(index, "keywords"): parser.as_text(words, f"keywords.{index}")
        for index, words in parser.section(data, "keywords").items()
    }

    identifiers: Dict[int, Tuple[str, ...]] = {}
    for style_class, words in parser.groups(data, "identifiers").items():
        if not isinstance(words, (list, tuple)):
            continue
        identifiers[parser.as_int(style_class, "identifiers")] = tuple(
            parser.as_text(w, f"identifiers.{style_class}") for w in words
        )

    styles = {
        parser.as_int(style_class, "styles"): parser.as_int(style, f"styles.{style_class}")
        for style_class, style in parser.section(data, "styles").items()
    }

    substyles: Dict[int, Tuple[int, ...]] = {}
    for style_class, group in parser.groups(data, "substyles").items():
        if not isinstance(group, (list, tuple)):
            continue
        substyles[parser.as_int(style_class, "substyles")] = tuple(
            parser.as_int(s, f"substyles.{style_class}") for s in group
        )

    return LanguageSpec(
        lexer=parser.lexer(data.get("lexer")),
        properties=properties,
        keywords=keywords,
        identifiers=identifiers,
        comments=parser.comments(data.get("comments")),
        styles=styles,
        substyles=substyles,
    )


__all__ = [
    "LexerById",
    "LexerByName",
    "LexerSelector",
    "CommentSpec",
    "LanguageSpec",
    "parse_language_spec",
]

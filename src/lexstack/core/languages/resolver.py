"""Resolve one language's lexer configuration and style map.

Every layer holding ``<app>/languages/<id>.yaml`` is applied to the editor in
priority order:

- lexer, properties, keyword sets and comment tokens are sent to the editor
  immediately; a later layer re-sending the same setting wins, a later layer
  omitting it leaves the earlier value in place;
- identifier groups allocate sub-styles (one allocation per style class per
  layer) and register each identifier string on its sub-style;
- ``styles`` and ``substyles`` produce a per-layer style map which is folded
  into the result, later layers overriding earlier ones key by key.

The result maps style classes and allocated sub-style ids to visual style
ids; rendering it is the job of the host's styler.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, Optional

from lexstack.core.config import LexstackSettings, load_settings
from lexstack.core.editor import EditorCommands
from lexstack.core.layers import LayerStack, resolve_layer_stack
from lexstack.core.utils.merge import StyleMap, fold_style_maps

from .spec import LanguageSpec, LexerById, parse_language_spec

logger = logging.getLogger(__name__)

SubstyleAllocation = Dict[int, int]


def _select_lexer(editor: EditorCommands, spec: LanguageSpec) -> None:
    if isinstance(spec.lexer, LexerById):
        editor.set_lexer(spec.lexer.lexer_id)
    else:
        editor.set_lexer_language(spec.lexer.name)


def _allocate_identifiers(editor: EditorCommands, spec: LanguageSpec) -> SubstyleAllocation:
    starts: SubstyleAllocation = {}
    for style_class, words in spec.identifiers.items():
        start = editor.allocate_substyles(style_class, len(words))
        if start < 0:
            # Refused allocation: no anchor, so its substyle group is dropped.
            logger.warning("No sub-styles allocated for style class %d; skipping its identifiers", style_class)
            continue
        starts[style_class] = start
        for offset, word in enumerate(words):
            editor.set_identifiers(start + offset, word)
    return starts


def _apply_comments(editor: EditorCommands, spec: LanguageSpec) -> None:
    if spec.comments is None:
        return
    if spec.comments.line is not None:
        editor.set_comment_line_token(spec.comments.line)
    if spec.comments.block is not None:
        editor.set_comment_block_tokens(*spec.comments.block)


def build_style_map(spec: LanguageSpec, starts: SubstyleAllocation) -> StyleMap:
    """Build one layer's style map.

    Direct ``styles`` entries come first; substyle groups are anchored at the
    start id allocated for their style class and never displace a direct
    entry with the same key. Groups whose class has no allocation in this
    layer are dropped.
    """
    style_map: StyleMap = dict(spec.styles)
    for style_class, group in spec.substyles.items():
        start = starts.get(style_class)
        if start is None:
            logger.debug("No identifiers allocated for style class %d; ignoring its substyles", style_class)
            continue
        for offset, style in enumerate(group):
            style_map.setdefault(start + offset, style)
    return style_map


def apply_language_spec(editor: EditorCommands, spec: LanguageSpec) -> StyleMap:
    """Send one layer's settings to ``editor`` and return its style map."""
    _select_lexer(editor, spec)
    for name, value in spec.properties.items():
        editor.set_property(name, value)
    for index, words in spec.keywords.items():
        editor.set_keywords(index, words)
    starts = _allocate_identifiers(editor, spec)
    _apply_comments(editor, spec)
    return build_style_map(spec, starts)


class LanguageStyleResolver:
    """Applies layered language definitions to editor instances."""

    def __init__(
        self,
        stack: Optional[LayerStack] = None,
        settings: Optional[LexstackSettings] = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.stack = stack if stack is not None else resolve_layer_stack(self.settings)

    def _layer_style_maps(self, editor: EditorCommands, language_id: str) -> Iterator[StyleMap]:
        relpath: Path = self.settings.language_relpath(language_id)
        for layer, data in self.stack.iter_documents(relpath):
            spec = parse_language_spec(data, source=layer.path / relpath)
            logger.debug("Applying %s from layer %s", language_id, layer.id)
            yield apply_language_spec(editor, spec)

    def apply_language(self, editor: EditorCommands, language_id: str) -> StyleMap:
        """Configure ``editor`` for ``language_id`` and return the style map.

        Sub-styles from any previous language are freed first. Layers without
        a readable document contribute nothing.

        Raises:
            LanguageDefinitionError: A layer's document parses but is corrupt.
        """
        editor.free_substyles()
        return fold_style_maps(self._layer_style_maps(editor, language_id))


def apply_language(
    editor: EditorCommands,
    language_id: str,
    *,
    stack: Optional[LayerStack] = None,
    settings: Optional[LexstackSettings] = None,
) -> StyleMap:
    """Convenience wrapper around :meth:`LanguageStyleResolver.apply_language`."""
    return LanguageStyleResolver(stack, settings).apply_language(editor, language_id)


__all__ = [
    "LanguageStyleResolver",
    "SubstyleAllocation",
    "apply_language",
    "apply_language_spec",
    "build_style_map",
]

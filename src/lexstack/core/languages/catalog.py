"""Language catalog built from layered ``languages.yaml`` documents.

Catalog document schema::

    cpp:
      name: C++
      extensions: [cpp, cxx, h, hpp]
    python:
      name: Python
      extensions: [py]

Layers are read low → high. For a language id present in several layers the
last layer's display name and extension set win; the list of known ids keeps
the order in which ids first appeared. An extension claimed by several
languages maps to the last claimant.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from lexstack.core.config import LexstackSettings, load_settings
from lexstack.core.exceptions import CatalogDefinitionError
from lexstack.core.layers import LayerStack
from lexstack.core.schemas import validate_payload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LanguageCatalogEntry:
    id: str
    display_name: str
    extensions: FrozenSet[str]


class LanguageCatalog:
    """Registry of known languages and the extension index.

    Usage:
        catalog = LanguageCatalog(settings)
        catalog.load(resolve_layer_stack(settings))
        lang, found = catalog.language_for_extension("cpp")
    """

    def __init__(self, settings: Optional[LexstackSettings] = None) -> None:
        self.settings = settings or load_settings()
        self._languages: List[str] = []
        self._names: Dict[str, str] = {}
        self._extensions: Dict[str, FrozenSet[str]] = {}
        self._by_extension: Dict[str, str] = {}

    @classmethod
    def from_layers(
        cls, stack: LayerStack, settings: Optional[LexstackSettings] = None
    ) -> "LanguageCatalog":
        catalog = cls(settings)
        catalog.load(stack)
        return catalog

    def load(self, stack: LayerStack) -> None:
        """Read the catalog document of every layer, lowest priority first.

        Layers without a readable document are skipped.

        Raises:
            CatalogDefinitionError: A document parses but an entry lacks
                ``name`` or ``extensions`` (or has the wrong types).
        """
        relpath = self.settings.catalog_relpath()
        for layer, data in stack.iter_documents(relpath):
            if data is None:
                continue
            path = layer.path / relpath
            validate_payload(
                data,
                "catalog",
                error_cls=CatalogDefinitionError,
                context={"path": path, "layer": layer.id},
            )
            for language_id, entry in data.items():
                self._add(str(language_id), entry)
            logger.debug("Loaded %d catalog entries from %s", len(data), path)

    def _add(self, language_id: str, entry: Dict[str, Any]) -> None:
        extensions = [str(ext) for ext in entry["extensions"]]
        for ext in extensions:
            self._by_extension[ext] = language_id
        if language_id not in self._names:
            self._languages.append(language_id)
        self._names[language_id] = str(entry["name"])
        self._extensions[language_id] = frozenset(extensions)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    @property
    def languages(self) -> List[str]:
        """Known language ids (first-appearance order unless sorted)."""
        return list(self._languages)

    def sort_alphabetically(self) -> None:
        self._languages.sort()

    def language_for_extension(self, ext: str) -> Tuple[str, bool]:
        """Return ``(language_id, True)`` for a known extension.

        Unknown extensions give ``(fallback_language, False)``.
        """
        language_id = self._by_extension.get(ext)
        if language_id is None:
            return self.settings.fallback_language, False
        return language_id, True

    def display_name(self, language_id: str) -> Optional[str]:
        return self._names.get(language_id)

    def extensions(self, language_id: str) -> FrozenSet[str]:
        return self._extensions.get(language_id, frozenset())

    def entry(self, language_id: str) -> Optional[LanguageCatalogEntry]:
        if language_id not in self._names:
            return None
        return LanguageCatalogEntry(
            id=language_id,
            display_name=self._names[language_id],
            extensions=self._extensions[language_id],
        )

    def entries(self) -> List[LanguageCatalogEntry]:
        return [e for e in (self.entry(i) for i in self._languages) if e is not None]

    def __contains__(self, language_id: object) -> bool:
        return language_id in self._names

    def __len__(self) -> int:
        return len(self._languages)


__all__ = ["LanguageCatalog", "LanguageCatalogEntry"]

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from lexstack.core.config import LexstackSettings, load_settings
from lexstack.core.utils.io import DocumentStatus, load_document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayerSpec:
    """A single data-directory layer root (e.g., system, user)."""

    id: str
    path: Path


@dataclass(frozen=True)
class LayerStack:
    """Resolved data-directory layers, ordered low → high precedence.

    Every merge in lexstack is "later layer wins", so the order of
    ``layers`` is the override order.
    """

    layers: Tuple[LayerSpec, ...]

    @classmethod
    def from_paths(cls, paths: Iterable[Path]) -> "LayerStack":
        """Build a stack from host-supplied roots (already in priority order)."""
        return cls(
            layers=tuple(LayerSpec(id=f"layer{i}", path=Path(p)) for i, p in enumerate(paths))
        )

    def __iter__(self) -> Iterator[LayerSpec]:
        return iter(self.layers)

    def __len__(self) -> int:
        return len(self.layers)

    def layer_by_id(self, layer_id: str) -> Optional[LayerSpec]:
        for layer in self.layers:
            if layer.id == layer_id:
                return layer
        return None

    def paths(self) -> List[Path]:
        return [layer.path for layer in self.layers]

    def for_each(self, func: Callable[[Path], None]) -> None:
        """Call ``func`` once per layer root, lowest priority first.

        Missing directories are passed through; the callee decides what an
        absent root means.
        """
        for layer in self.layers:
            func(layer.path)

    def iter_documents(self, relpath: Path) -> Iterator[Tuple[LayerSpec, Any]]:
        """Yield ``(layer, data)`` for every layer where ``relpath`` loads.

        Missing and unparseable documents are skipped. Other errors propagate.
        """
        for layer in self.layers:
            result = load_document(layer.path / relpath)
            if result.status is DocumentStatus.NOT_FOUND:
                logger.debug("Layer %s: %s not present", layer.id, result.path)
                continue
            if result.status is DocumentStatus.PARSE_ERROR:
                logger.warning("Layer %s: ignoring unparseable %s: %s", layer.id, result.path, result.error)
                continue
            yield layer, result.data


def _expand_layer_path(raw: str) -> Path:
    s = os.path.expandvars(str(raw)).strip()
    return Path(s).expanduser()


def resolve_layer_stack(settings: Optional[LexstackSettings] = None) -> LayerStack:
    """Resolve the configured layer stack.

    Default stack (low → high):
      system → user → system-nonpackaged → user-nonpackaged

    Raises:
        ValueError: Duplicate layer ids in ``layers.roots``.
    """
    settings = settings or load_settings()
    seen: set[str] = set()
    stack: List[LayerSpec] = []
    for root in settings.layer_roots:
        if root.id in seen:
            raise ValueError(f"Duplicate layer id '{root.id}' in layers config.")
        seen.add(root.id)
        stack.append(LayerSpec(id=root.id, path=_expand_layer_path(root.path)))
    return LayerStack(layers=tuple(stack))


__all__ = ["LayerSpec", "LayerStack", "resolve_layer_stack"]

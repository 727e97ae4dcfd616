"""Canonical merge utilities.

- ``deep_merge``: recursive dictionary merge used for settings overlays.
- ``merge_style_maps`` / ``fold_style_maps``: flat style-map merges used by
  the language resolver. The later (higher priority) map wins on key
  collisions; keys unique to either side survive.
"""
from __future__ import annotations

from functools import reduce
from typing import Any, Dict, Iterable, Mapping

StyleMap = Dict[int, int]


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries without mutating inputs.

    Lists are replaced, not concatenated.

    Example:
        >>> base = {"a": 1, "b": {"c": 2}}
        >>> override = {"b": {"d": 3}}
        >>> deep_merge(base, override)
        {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    result: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def merge_style_maps(base: Mapping[int, int], override: Mapping[int, int]) -> StyleMap:
    """Return ``base`` overlaid with ``override`` as a new map.

    Example:
        >>> merge_style_maps({0: 10, 1: 11}, {1: 99, 200: 50})
        {0: 10, 1: 99, 200: 50}
    """
    merged: StyleMap = dict(base)
    merged.update(override)
    return merged


def fold_style_maps(layers: Iterable[Mapping[int, int]]) -> StyleMap:
    """Merge style maps given in increasing priority order.

    ``layers`` is consumed lazily, one map at a time, so producers may have
    side effects that must happen in layer order.
    """
    return reduce(merge_style_maps, layers, {})


__all__ = ["StyleMap", "deep_merge", "merge_style_maps", "fold_style_maps"]

"""
Bundled lexstack resources.

``config/defaults.yaml`` holds the default settings (application name,
document suffix, layer roots) and ``schemas/`` the JSON Schemas, written in
YAML, for settings, catalogs and language documents. Both are shipped as
package data and located through importlib.resources.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """
    Locate a bundled resource.

    Args:
        subpackage: ``"config"`` or ``"schemas"``
        filename: File inside the subpackage; omit it for the directory itself

    Example:
        >>> get_data_path("schemas", "language.schema.yaml").name
        'language.schema.yaml'
    """
    pkg = resources.files("lexstack.data")
    base = Path(str(pkg / subpackage))
    return base / filename if filename else base


@lru_cache(maxsize=16)
def read_yaml(subpackage: str, filename: str) -> Any:
    """Parse a bundled YAML resource once per process; treat it as read-only."""
    path = get_data_path(subpackage, filename)
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def file_exists(subpackage: str, filename: str) -> bool:
    return get_data_path(subpackage, filename).exists()


def clear_caches() -> None:
    """Forget parsed resources, e.g. between tests."""
    read_yaml.cache_clear()


__all__ = [
    "get_data_path",
    "read_yaml",
    "file_exists",
    "clear_caches",
]

"""I/O utilities for lexstack.

- YAML: document loading with typed outcomes (loaded / not found / parse error)
"""
from __future__ import annotations

from .yaml import (
    DocumentLoad,
    DocumentStatus,
    load_document,
    read_yaml,
)

__all__ = [
    "DocumentLoad",
    "DocumentStatus",
    "load_document",
    "read_yaml",
]

"""YAML document loading with typed outcomes.

A layered lookup needs to tell "this layer has nothing to say" apart from
"this layer is broken". Loading therefore never raises for a missing or
unparseable file; it returns a :class:`DocumentLoad` whose ``status`` says
which of the two happened. Anything else (e.g. a programming error in a
caller-supplied path) propagates.
"""
from __future__ import annotations

import errno
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import yaml


class DocumentStatus(str, Enum):
    LOADED = "loaded"
    NOT_FOUND = "not_found"
    PARSE_ERROR = "parse_error"


# Reading a path that cannot be opened as a file counts as "absent".
_UNREADABLE_ERRNOS = {errno.ENOENT, errno.EISDIR, errno.ENOTDIR, errno.EACCES}


@dataclass(frozen=True)
class DocumentLoad:
    """Result of one attempt to load a YAML document."""

    path: Path
    status: DocumentStatus
    data: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is DocumentStatus.LOADED


def load_document(path: Path) -> DocumentLoad:
    """Load a YAML document from ``path``.

    Returns:
        DocumentLoad with ``status`` LOADED (``data`` may be None for an empty
        document), NOT_FOUND, or PARSE_ERROR (``error`` holds the parser
        message).

    Examples:
        >>> result = load_document(Path("languages.yaml"))
        >>> if result.ok:
        ...     print(result.data)
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        if exc.errno in _UNREADABLE_ERRNOS:
            return DocumentLoad(path=path, status=DocumentStatus.NOT_FOUND, error=str(exc))
        raise
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        return DocumentLoad(path=path, status=DocumentStatus.PARSE_ERROR, error=str(exc))
    return DocumentLoad(path=path, status=DocumentStatus.LOADED, data=data)


def read_yaml(path: Path, default: Any = None, raise_on_error: bool = False) -> Any:
    """Read YAML with error handling.

    Returns default if file is missing or invalid, unless raise_on_error is True.

    Args:
        path: YAML file path to read
        default: Value to return if file missing or invalid (default: None)
        raise_on_error: If True, raise instead of returning default.

    Raises:
        FileNotFoundError: missing file and ``raise_on_error``.
        yaml.YAMLError: invalid YAML and ``raise_on_error``.
    """
    result = load_document(path)
    if result.status is DocumentStatus.NOT_FOUND:
        if raise_on_error:
            raise FileNotFoundError(f"File not found: {result.path}")
        return default
    if result.status is DocumentStatus.PARSE_ERROR:
        if raise_on_error:
            raise yaml.YAMLError(f"Invalid YAML in {result.path}: {result.error}")
        return default
    return result.data if result.data is not None else default


__all__ = [
    "DocumentStatus",
    "DocumentLoad",
    "load_document",
    "read_yaml",
]

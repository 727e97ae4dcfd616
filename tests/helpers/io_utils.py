"""I/O utilities for writing test files.

All functions create parent directories automatically if they don't exist.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def write_yaml(
    path: Path,
    data: Any,
    *,
    sort_keys: bool = False,
    default_flow_style: bool = False,
) -> Path:
    """Write data to YAML file, creating parent directories if needed.

    Examples:
        >>> write_yaml(Path("languages.yaml"), {"cpp": {"name": "C++", "extensions": ["cpp"]}})
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    content = yaml.safe_dump(
        data,
        default_flow_style=default_flow_style,
        sort_keys=sort_keys,
        allow_unicode=True,
    )
    path.write_text(content, encoding="utf-8")
    return path


def write_text(path: Path, content: str) -> Path:
    """Write text content to file, creating parent directories if needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path

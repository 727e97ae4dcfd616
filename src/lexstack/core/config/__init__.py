"""lexstack configuration (bundled defaults + host overrides)."""
from __future__ import annotations

from .settings import LayerRoot, LexstackSettings, load_settings

__all__ = ["LayerRoot", "LexstackSettings", "load_settings"]

"""JSON Schema validation of lexstack YAML documents."""
from __future__ import annotations

from .validation import collect_errors, load_schema, validate_payload

__all__ = ["collect_errors", "load_schema", "validate_payload"]

"""Shared schema validation utilities.

lexstack validates YAML documents (settings, catalogs, language definitions)
using JSON Schema. Schemas are stored as YAML files under
``lexstack.data/schemas/`` and loaded in a single, consistent way.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Type

import jsonschema
from jsonschema import Draft202012Validator

from lexstack.core.exceptions import DefinitionError
from lexstack.data import file_exists, read_yaml


def load_schema(schema_name: str) -> Dict[str, Any]:
    """Load a bundled schema dict.

    Automatically appends ``.schema.yaml`` if no extension is present.

    Raises:
        FileNotFoundError: If schema file doesn't exist.
        ValueError: If schema is not a YAML mapping.
    """
    if not schema_name.endswith((".yaml", ".yml")):
        schema_name = f"{schema_name}.schema.yaml"

    if not file_exists("schemas", schema_name):
        raise FileNotFoundError(f"Schema not found: {schema_name}")

    schema = read_yaml("schemas", schema_name)
    if not isinstance(schema, dict):
        raise ValueError(f"Schema must be a YAML mapping, got {type(schema).__name__}")
    return schema


def _format_error(error: jsonschema.ValidationError) -> str:
    if error.absolute_path:
        path_str = ".".join(str(p) for p in error.absolute_path)
        return f"{path_str}: {error.message}"
    return error.message


def collect_errors(payload: Any, schema_name: str) -> List[str]:
    """Validate a payload and return error messages (empty if valid)."""
    validator = Draft202012Validator(load_schema(schema_name))
    errors = sorted(validator.iter_errors(payload), key=lambda e: [str(p) for p in e.absolute_path])
    return [_format_error(e) for e in errors]


def validate_payload(
    payload: Any,
    schema_name: str,
    *,
    error_cls: Type[DefinitionError] = DefinitionError,
    context: Optional[Mapping[str, Any]] = None,
) -> None:
    """Validate a payload against a bundled schema.

    Raises:
        error_cls: If validation fails. All messages are joined into one.
    """
    errors = collect_errors(payload, schema_name)
    if errors:
        raise error_cls(
            f"Validation failed against schema '{schema_name}': " + "; ".join(errors),
            context=context,
        )


__all__ = [
    "load_schema",
    "collect_errors",
    "validate_payload",
]

"""
Schema Validation Utilities

Validates compilation manifest JSON before it is turned into models.

Two layers:
- Structural checks with readable messages (required fields, types,
  schema version) that always run
- Full JSON Schema validation via jsonschema when strict=True
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Schema version constants
MANIFEST_SCHEMA_VERSION = 1


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_manifest(data: Any, *, strict: bool = True) -> None:
    """
    Validate compilation manifest data.

    Args:
        data: Parsed manifest JSON
        strict: If True, also validate against manifest.schema.json

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Manifest must be a JSON object, got {type(data).__name__}",
            path="",
        )

    required = ["schema_version", "compilation_units"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    version = data.get("schema_version")
    if version != MANIFEST_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported manifest schema version: {version} (expected {MANIFEST_SCHEMA_VERSION})",
            path="schema_version"
        )

    units = data["compilation_units"]
    if not isinstance(units, list):
        raise ValidationError(
            "compilation_units must be a list",
            path="compilation_units"
        )
    for i, unit in enumerate(units):
        _validate_unit(unit, f"compilation_units[{i}]")

    if strict:
        schema = _load_schema("manifest")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            )


def _validate_unit(data: Any, path: str) -> None:
    """Validate a single compilation unit."""
    if not isinstance(data, dict):
        raise ValidationError(
            "compilation unit must be an object",
            path=path
        )

    pkg = data.get("pkg")
    if pkg is not None and not isinstance(pkg, str):
        raise ValidationError(
            f"Invalid pkg: {pkg!r} (must be a string)",
            path=f"{path}.pkg"
        )

    top_level = data.get("top_level", [])
    if not isinstance(top_level, list):
        raise ValidationError(
            "top_level must be a list",
            path=f"{path}.top_level"
        )
    for j, name in enumerate(top_level):
        if not isinstance(name, str) or not name:
            raise ValidationError(
                f"Invalid top-level name: {name!r}",
                path=f"{path}.top_level[{j}]"
            )
        if "/" in name:
            raise ValidationError(
                f"Top-level name must not contain '/': {name!r}",
                path=f"{path}.top_level[{j}]"
            )

    generated = data.get("generated_by_annotation_processor", False)
    if not isinstance(generated, bool):
        raise ValidationError(
            f"Invalid generated_by_annotation_processor: {generated!r} (must be boolean)",
            path=f"{path}.generated_by_annotation_processor"
        )

"""
Serialization Utilities

Provides JSON loading utilities for the compilation manifest.

- `deserialize_manifest` converts a validated dict into a Manifest
- `load_manifest` reads a manifest file
- Validation via schemas before deserialization
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..models.units import Manifest
from ..schemas.validator import validate_manifest, ValidationError

logger = logging.getLogger(__name__)


def deserialize_manifest(
    data: dict[str, Any],
    *,
    validate: bool = True,
) -> Manifest:
    """
    Deserialize a Manifest from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate against schema first

    Returns:
        Manifest instance

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_manifest(data, strict=True)
    return Manifest.from_dict(data)


def load_manifest(path: Path, *, validate: bool = True) -> Manifest:
    """
    Load a compilation manifest from a JSON file.

    Args:
        path: Path to manifest file
        validate: Whether to validate the manifest

    Returns:
        Manifest instance

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file is not valid JSON or fails validation
    """
    if not path.exists():
        raise FileNotFoundError(f"Manifest file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(
                f"Manifest is not valid JSON: {e}",
                path=str(path),
                errors=[str(e)]
            )

    manifest = deserialize_manifest(data, validate=validate)
    logger.debug(f"Loaded {len(manifest)} compilation units from {path}")
    return manifest

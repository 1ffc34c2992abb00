"""
Schemas Package

JSON schema definitions and validation utilities for the compilation manifest.
"""

from .validator import (
    validate_manifest,
    ValidationError,
    MANIFEST_SCHEMA_VERSION,
)

__all__ = [
    "validate_manifest",
    "ValidationError",
    "MANIFEST_SCHEMA_VERSION",
]

"""
Utils Package

Manifest loading functions.
"""

from .serialization import (
    deserialize_manifest,
    load_manifest,
)

__all__ = [
    "deserialize_manifest",
    "load_manifest",
]

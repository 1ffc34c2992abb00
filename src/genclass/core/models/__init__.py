"""
Core Models Package

Immutable data models describing a compilation.

All models in this package are frozen dataclasses, read once from the
manifest and never mutated for the rest of the run.
"""

from .units import CompilationUnit, Manifest

__all__ = [
    "CompilationUnit",
    "Manifest",
]

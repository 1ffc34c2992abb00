"""
genclass Core Package

Shared data models and manifest utilities used by the extractor and the CLI.
"""

from .models import CompilationUnit, Manifest

__all__ = [
    "CompilationUnit",
    "Manifest",
]

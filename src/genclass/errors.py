"""
Module: errors

Purpose:
    Exception hierarchy for fatal pipeline failures. Each error records
    the stage that failed so the CLI can report it.

Used By:
    - extractor.pipeline
    - output.jar_writer
    - cli
"""

from __future__ import annotations


class GenClassError(Exception):
    """Base class for fatal genclass failures."""

    stage = "genclass"

    def __init__(self, message: str, *, path: str = ""):
        super().__init__(message)
        self.path = path


class ManifestError(GenClassError):
    """Manifest missing, unreadable, or malformed."""

    stage = "manifest"


class ArchiveError(GenClassError):
    """Input class jar unreadable or malformed."""

    stage = "classification"


class OutputError(GenClassError):
    """Output jar could not be written."""

    stage = "assembly"

"""
Module: units

Purpose:
    Provides the CompilationUnit and Manifest dataclasses - the read-only
    description of one Java compilation. Each unit records the package,
    the top-level declarations, and whether an annotation processor
    generated the source.

Key Functions:
    - CompilationUnit.package_path: Slash-separated package directory
    - CompilationUnit.from_dict() / Manifest.from_dict(): Parse manifest JSON

Dependencies:
    - dataclasses (std)
    - typing (std)

Used By:
    - core.utils.serialization
    - extractor.prefixes
    - extractor.pipeline
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class CompilationUnit:
    """
    One source file of the compilation (immutable).

    Attributes:
        pkg: Dot-separated package name, None for the default package
        top_level: Top-level declaration names as declared (no slashes)
        generated_by_annotation_processor: True if the source was generated
        path: Source file path, informational only

    Invariants:
        - pkg is never the empty string (normalized to None)
        - top_level names contain no "/"

    Example:
        >>> unit = CompilationUnit("com.example", ("Foo",), True)
        >>> unit.package_path
        'com/example/'
    """

    pkg: Optional[str]
    top_level: tuple[str, ...] = ()
    generated_by_annotation_processor: bool = False
    path: Optional[str] = None

    def __post_init__(self) -> None:
        """Normalize and validate on construction."""
        if self.pkg == "":
            object.__setattr__(self, "pkg", None)
        if not isinstance(self.top_level, tuple):
            object.__setattr__(self, "top_level", tuple(self.top_level))
        for name in self.top_level:
            if "/" in name:
                raise ValueError(f"Top-level name must not contain '/': {name!r}")

    @property
    def package_path(self) -> str:
        """Package as a directory prefix: "" or "a/b/" for package a.b."""
        if self.pkg is None:
            return ""
        return self.pkg.replace(".", "/") + "/"

    @property
    def is_generated(self) -> bool:
        return self.generated_by_annotation_processor

    @classmethod
    def from_dict(cls, data: dict) -> CompilationUnit:
        """
        Deserialize from the manifest JSON representation.

        Missing top_level defaults to no declarations, a missing
        generated flag defaults to False.
        """
        return cls(
            pkg=data.get("pkg"),
            top_level=tuple(data.get("top_level", [])),
            generated_by_annotation_processor=bool(
                data.get("generated_by_annotation_processor", False)
            ),
            path=data.get("path"),
        )


@dataclass(frozen=True)
class Manifest:
    """
    Ordered compilation units for one compilation (immutable).

    Attributes:
        units: Compilation units in manifest order
    """

    units: tuple[CompilationUnit, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.units, tuple):
            object.__setattr__(self, "units", tuple(self.units))

    def __len__(self) -> int:
        return len(self.units)

    @classmethod
    def from_dict(cls, data: dict) -> Manifest:
        return cls(
            units=tuple(
                CompilationUnit.from_dict(u) for u in data.get("compilation_units", [])
            )
        )

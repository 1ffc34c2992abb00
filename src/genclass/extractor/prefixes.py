"""
Module: extractor.prefixes

Purpose:
    Build the path prefixes used to attribute class files to compilation
    units. A top-level class "c.g.Foo" compiles to "c/g/Foo.class" and
    also to "c/g/Foo$Inner.class" or "c/g/Foo$1.class", so only the
    top-level path "c/g/Foo" is indexed; nested names are resolved when
    matching.

Key Functions:
    - build_prefixes(): Prefixes for all units matching a predicate
    - build_prefix_index(): Generated and user-written prefixes together
    - prefix_matches(): Nested-class-aware membership test

Used By:
    - extractor.classification
    - extractor.pipeline
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from genclass.core.models.units import CompilationUnit, Manifest

logger = logging.getLogger(__name__)

PrefixSet = frozenset[str]
UnitPredicate = Callable[[CompilationUnit], bool]


def is_generated(unit: CompilationUnit) -> bool:
    return unit.generated_by_annotation_processor


def is_user_written(unit: CompilationUnit) -> bool:
    return not unit.generated_by_annotation_processor


def unit_prefixes(unit: CompilationUnit) -> Iterator[str]:
    """Yield one prefix per top-level declaration of the unit."""
    pkg = unit.package_path
    for toplevel in unit.top_level:
        yield pkg + toplevel


def build_prefixes(
    units: Iterable[CompilationUnit],
    predicate: UnitPredicate,
) -> PrefixSet:
    """
    Collect the prefixes of every unit matching the predicate.

    Args:
        units: Compilation units in manifest order
        predicate: Selects which units contribute prefixes

    Returns:
        Set of "package/path/TopLevel" strings, duplicates collapsed
    """
    return frozenset(
        prefix
        for unit in units
        if predicate(unit)
        for prefix in unit_prefixes(unit)
    )


@dataclass(frozen=True)
class PrefixIndex:
    """
    Prefixes of generated and hand-written units for one compilation.

    Attributes:
        generated: Prefixes of units generated by annotation processors
        user_written: Prefixes of all other units
    """
    generated: PrefixSet = frozenset()
    user_written: PrefixSet = frozenset()

    @property
    def overlap(self) -> PrefixSet:
        """Prefixes declared by both a generated and a hand-written unit."""
        return self.generated & self.user_written


def build_prefix_index(manifest: Manifest) -> PrefixIndex:
    """Build both prefix sets for a manifest."""
    index = PrefixIndex(
        generated=build_prefixes(manifest.units, is_generated),
        user_written=build_prefixes(manifest.units, is_user_written),
    )
    logger.info(
        f"Indexed {len(index.generated)} generated and "
        f"{len(index.user_written)} user-written top-level classes"
    )
    if index.overlap:
        logger.warning(
            f"{len(index.overlap)} top-level classes are declared by both generated "
            f"and user-written units: {', '.join(sorted_prefixes(index.overlap))}"
        )
    return index


def sorted_prefixes(prefixes: PrefixSet) -> list[str]:
    return sorted(prefixes)


def prefix_matches(prefixes: PrefixSet, class_name: str) -> bool:
    """
    Check whether a class name belongs to one of the prefixes.

    A class whose name contains '$' isn't necessarily an inner class, so
    every '$'-terminated prefix of the name is tested against the set.

    Example:
        >>> prefix_matches(frozenset({"a/Outer"}), "a/Outer$Inner$1")
        True
    """
    if class_name in prefixes:
        return True
    i = class_name.find("$")
    while i != -1:
        if class_name[:i] in prefixes:
            return True
        i = class_name.find("$", i + 1)
    return False

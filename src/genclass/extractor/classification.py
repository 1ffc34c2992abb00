"""
Module: extractor.classification

Purpose:
    Decide, per class file entry, whether it belongs in the generated
    classes jar. Pure functions over the prefix index; no state is carried
    between entries.

Key Functions:
    - class_name_for(): Strip ".class" from an entry name
    - classify_class_name(): Decision with the reason for it
    - is_generated_class(): Boolean form of the decision

Rule:
    included = matches(generated) or not matches(user_written)

    Class files that cannot be attributed to any hand-written source
    (synthetic classes, classes emitted for unknown units) are treated as
    generated.

Used By:
    - extractor.pipeline
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .prefixes import PrefixIndex, prefix_matches

CLASS_SUFFIX = ".class"


class Decision(str, Enum):
    """Outcome of classifying one class file."""
    GENERATED = "generated"          # Matches a generated unit
    UNATTRIBUTED = "unattributed"    # Matches no unit, assumed generated
    USER_WRITTEN = "user_written"    # Matches only a hand-written unit

    def __str__(self) -> str:
        return self.value

    @property
    def included(self) -> bool:
        return self is not Decision.USER_WRITTEN


def class_name_for(entry_name: str) -> Optional[str]:
    """
    Convert a jar entry name to a class name.

    Returns:
        "a/b/Foo$1" for "a/b/Foo$1.class", None for non-class entries
    """
    if not entry_name.endswith(CLASS_SUFFIX):
        return None
    return entry_name[: -len(CLASS_SUFFIX)]


def classify_class_name(class_name: str, index: PrefixIndex) -> Decision:
    """
    Classify a class name against the prefix index.

    Generated prefixes win over user-written ones, so a class claimed by
    both kinds of unit is included.
    """
    if prefix_matches(index.generated, class_name):
        return Decision.GENERATED
    if not prefix_matches(index.user_written, class_name):
        return Decision.UNATTRIBUTED
    return Decision.USER_WRITTEN


def is_generated_class(class_name: str, index: PrefixIndex) -> bool:
    return classify_class_name(class_name, index).included

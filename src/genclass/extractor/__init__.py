"""
Module: extractor

Purpose:
    Generated class extraction. Attributes each class file of a compiled
    jar to a compilation unit by name prefix and keeps the ones that came
    from annotation processor output.

Key Functions:
    - run_genclass(): Main entry point
    - build_prefix_index(): Generated and user-written prefix sets
    - prefix_matches(): Nested-class-aware prefix test
    - is_generated_class(): Inclusion rule for one class name

Key Classes:
    - GenClassConfig: Configuration for a run
    - GenClassResult: Summary of a run
"""

from .config import GenClassConfig
from .classification import Decision, class_name_for, classify_class_name, is_generated_class
from .prefixes import PrefixIndex, build_prefix_index, build_prefixes, prefix_matches
from .pipeline import (
    ExtractionResult,
    GenClassResult,
    extract_generated_classes,
    run_genclass,
)

__all__ = [
    "run_genclass",
    "extract_generated_classes",
    "ExtractionResult",
    "GenClassConfig",
    "GenClassResult",
    "Decision",
    "class_name_for",
    "classify_class_name",
    "is_generated_class",
    "PrefixIndex",
    "build_prefix_index",
    "build_prefixes",
    "prefix_matches",
]

"""
Module: extractor.config

Purpose:
    Configuration dataclass for a genclass run. Provides immutable
    settings for the input and output paths and the output jar options.

Key Classes:
    - GenClassConfig: Main configuration for the pipeline

Dependencies:
    - dataclasses: For frozen dataclass support

Used By:
    - extractor.pipeline: Uses GenClassConfig for pipeline settings
    - cli: Builds GenClassConfig from command-line arguments
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class GenClassConfig:
    """
    Configuration for the generated class extraction pipeline.

    None of these settings change which classes are included.

    Attributes:
        class_jar: Jar with all classes produced by the compilation
        manifest_path: Compilation manifest (JSON)
        output_jar: Destination for the generated classes jar
        temp_dir: Parent directory for the staging directory (default: system temp)
        compress: Deflate output entries (default True)
        normalize: Fixed timestamps and permissions in the output (default True)
        report_path: Optional path for a classification report (JSON)
        timing_path: Optional shared JSONL file for phase timings
    """
    class_jar: Path
    manifest_path: Path
    output_jar: Path
    temp_dir: Optional[Path] = None
    compress: bool = True
    normalize: bool = True
    report_path: Optional[Path] = None
    timing_path: Optional[Path] = None

"""
Module: extractor.pipeline

Purpose:
    Main pipeline orchestrator. Reads the compilation manifest, builds the
    prefix index, copies generated class files from the class jar into a
    staging directory and repackages them as the output jar.

Key Functions:
    - run_genclass(): Main entry point for a full run
    - extract_generated_classes(): Classification and copy step

Key Classes:
    - ExtractionResult: Counts from the classification pass
    - GenClassResult: Summary of a full run

Dependencies:
    - zipfile (std): Class jar access
    - genclass.core.utils.serialization: Manifest loading
    - genclass.output.jar_writer: Output assembly

Used By:
    - genclass.cli: Command-line entry point
"""

from __future__ import annotations

import json
import logging
import shutil
import zipfile
import zlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from genclass.core.models.units import Manifest
from genclass.core.schemas.validator import ValidationError
from genclass.core.utils.serialization import load_manifest
from genclass.errors import ArchiveError, ManifestError, OutputError
from genclass.output.jar_writer import write_output_jar
from .config import GenClassConfig
from .classification import class_name_for, classify_class_name
from .diagnostics import ClassificationReport
from .prefixes import PrefixIndex, build_prefix_index
from .staging import staging_directory
from .timing import TimingLog, timed_phase

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    """
    Result of one pass over the class jar.

    Attributes:
        written: Class files copied to the staging directory
        excluded: Class files attributed to hand-written units
        skipped: Non-class entries ignored
        written_names: Entry names copied, in jar order
    """
    written: int = 0
    excluded: int = 0
    skipped: int = 0
    written_names: List[str] = field(default_factory=list)


@dataclass
class GenClassResult:
    """
    Result of a complete genclass run.

    Attributes:
        output_jar: Jar that was written
        entries_written: Entries in the output jar
        entries_excluded: Class files left out as hand-written
        entries_skipped: Non-class entries of the input jar
        warnings: Non-fatal problems encountered
    """
    output_jar: Path
    entries_written: int
    entries_excluded: int
    entries_skipped: int
    warnings: List[str] = field(default_factory=list)


def read_manifest(path: Path) -> Manifest:
    """
    Read the compilation manifest.

    Raises:
        ManifestError: If the manifest is missing, unreadable or invalid
    """
    try:
        return load_manifest(path)
    except ValidationError as e:
        location = f" at {e.path}" if e.path and e.path != str(path) else ""
        raise ManifestError(f"Invalid manifest {path}{location}: {e}", path=str(path)) from e
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ManifestError(f"Cannot read manifest {path}: {e}", path=str(path)) from e


def _staging_target(staging_dir: Path, entry_name: str) -> Path:
    """
    Resolve an entry name inside the staging directory.

    Only plain relative names are accepted, so the staged path maps back to
    exactly the same entry name in the output jar.
    """
    segments = entry_name.split("/")
    if any(segment in ("", ".", "..") for segment in segments):
        raise ArchiveError(f"Refusing to extract entry with non-canonical path: {entry_name}")
    return staging_dir.joinpath(*segments)


def extract_generated_classes(
    class_jar: Path,
    index: PrefixIndex,
    staging_dir: Path,
    *,
    report: Optional[ClassificationReport] = None,
) -> ExtractionResult:
    """
    Copy the class files of generated sources into the staging directory.

    Each entry is decided independently from the prefix index. Entries
    that are not class files are skipped.

    Args:
        class_jar: Jar with all compiled classes
        index: Prefixes of generated and user-written units
        staging_dir: Destination; entries keep their jar paths
        report: Optional collector for per-entry decisions

    Returns:
        ExtractionResult with counts

    Raises:
        ArchiveError: If the jar cannot be read or an entry cannot be copied
    """
    result = ExtractionResult()
    try:
        with zipfile.ZipFile(class_jar) as jar:
            for entry in jar.infolist():
                name = entry.filename
                class_name = class_name_for(name)
                if class_name is None:
                    result.skipped += 1
                    if report is not None:
                        report.record_skipped(name)
                    continue

                decision = classify_class_name(class_name, index)
                if report is not None:
                    report.record(class_name, decision)
                if not decision.included:
                    result.excluded += 1
                    continue

                target = _staging_target(staging_dir, name)
                if target.exists():
                    raise ArchiveError(f"Duplicate entry in {class_jar}: {name}", path=str(class_jar))
                target.parent.mkdir(parents=True, exist_ok=True)
                with jar.open(entry) as src, open(target, "wb") as dst:
                    shutil.copyfileobj(src, dst)
                result.written += 1
                result.written_names.append(name)
    except ArchiveError:
        raise
    except (
        zipfile.BadZipFile,
        zipfile.LargeZipFile,
        zlib.error,
        NotImplementedError,
        RuntimeError,
        OSError,
        EOFError,
    ) as e:
        # zlib.error: corrupt deflate data, NotImplementedError: unknown
        # compression method, RuntimeError: encrypted entry
        raise ArchiveError(f"Cannot read class jar {class_jar}: {e}", path=str(class_jar)) from e

    logger.info(
        f"Classified {result.written + result.excluded} class files from {class_jar.name}: "
        f"{result.written} generated, {result.excluded} user-written"
    )
    return result


def run_genclass(config: GenClassConfig) -> GenClassResult:
    """
    Produce a jar with only the classes of generated sources.

    Pipeline:
    1. Remove any previous output jar
    2. Read manifest
    3. Build generated and user-written prefix sets
    4. In a fresh staging directory: classify and copy, then write the jar
    5. Write optional classification report and timing record

    Args:
        config: Paths and output options

    Returns:
        GenClassResult with entry counts

    Raises:
        ManifestError: Manifest missing or invalid
        ArchiveError: Class jar missing, unreadable or malformed
        OutputError: Output jar not writable

    Example:
        >>> result = run_genclass(GenClassConfig(
        ...     class_jar=Path("libfoo.jar"),
        ...     manifest_path=Path("libfoo.jar_manifest.json"),
        ...     output_jar=Path("libfoo-gen.jar"),
        ... ))
        >>> print(f"{result.entries_written} generated classes")
    """
    timing_log = TimingLog()
    warnings: List[str] = []

    # A failed run must not leave an older jar that looks current
    try:
        config.output_jar.unlink(missing_ok=True)
    except OSError as e:
        raise OutputError(
            f"Cannot remove existing output jar {config.output_jar}: {e}",
            path=str(config.output_jar),
        ) from e

    with timed_phase(timing_log, "manifest_read"):
        manifest = read_manifest(config.manifest_path)

    with timed_phase(timing_log, "prefix_index"):
        index = build_prefix_index(manifest)
    if index.overlap:
        warnings.append(
            f"{len(index.overlap)} top-level classes declared by both generated and user-written units"
        )

    if not config.class_jar.is_file():
        raise ArchiveError(f"Class jar not found: {config.class_jar}", path=str(config.class_jar))

    report = ClassificationReport(class_jar=str(config.class_jar)) if config.report_path else None

    with staging_directory(config.temp_dir) as staging_dir:
        with timed_phase(timing_log, "classification"):
            extraction = extract_generated_classes(
                config.class_jar, index, staging_dir, report=report
            )
        with timed_phase(timing_log, "assembly"):
            entries = write_output_jar(
                staging_dir,
                config.output_jar,
                compress=config.compress,
                normalize=config.normalize,
            )

    if report is not None and config.report_path:
        try:
            report.save(config.report_path)
        except OSError as e:
            msg = f"Failed to write classification report {config.report_path}: {e}"
            logger.warning(msg)
            warnings.append(msg)

    logger.debug(timing_log.summary())
    if config.timing_path:
        try:
            timing_log.append(config.timing_path, output_jar=str(config.output_jar))
        except OSError as e:
            msg = f"Failed to record timing data in {config.timing_path}: {e}"
            logger.warning(msg)
            warnings.append(msg)

    return GenClassResult(
        output_jar=config.output_jar,
        entries_written=entries,
        entries_excluded=extraction.excluded,
        entries_skipped=extraction.skipped,
        warnings=warnings,
    )

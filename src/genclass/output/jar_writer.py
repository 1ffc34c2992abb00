"""
Module: output.jar_writer

Purpose:
    Repackage the staging directory into the generated classes jar.
    Entries are written in sorted path order with fixed metadata, so
    identical inputs produce byte-identical jars.

Key Functions:
    - write_output_jar(): Main entry point
    - staged_files(): Sorted (arcname, path) pairs under a directory

Dependencies:
    - zipfile (std)

Used By:
    - extractor.pipeline: Output assembly step
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
import zipfile
from pathlib import Path

from genclass.errors import OutputError

logger = logging.getLogger(__name__)

# Timestamp stamped on every entry of a normalized jar
NORMALIZED_TIMESTAMP = (2010, 1, 1, 0, 0, 0)
NORMALIZED_MODE = 0o100644


def staged_files(staging_dir: Path) -> list[tuple[str, Path]]:
    """
    List regular files under a directory.

    Returns:
        (arcname, path) pairs sorted by arcname, arcnames "/"-separated
    """
    files = [
        (path.relative_to(staging_dir).as_posix(), path)
        for path in staging_dir.rglob("*")
        if path.is_file()
    ]
    files.sort(key=lambda item: item[0])
    return files


def write_output_jar(
    staging_dir: Path,
    output_path: Path,
    *,
    compress: bool = True,
    normalize: bool = True,
) -> int:
    """
    Write every file under staging_dir into a jar at output_path.

    The jar contains one entry per file, no directory entries and no
    generated manifest. It is written to a temporary file next to
    output_path and moved into place only once complete.

    Args:
        staging_dir: Directory tree to package
        output_path: Destination jar
        compress: Use ZIP_DEFLATED instead of ZIP_STORED
        normalize: Fixed timestamp and permissions for every entry

    Returns:
        Number of entries written

    Raises:
        OutputError: If the jar cannot be written
    """
    files = staged_files(staging_dir)
    compression = zipfile.ZIP_DEFLATED if compress else zipfile.ZIP_STORED

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
        )
        os.close(fd)
    except OSError as e:
        raise OutputError(f"Cannot write output jar {output_path}: {e}", path=str(output_path)) from e

    tmp_path = Path(tmp_name)
    try:
        with zipfile.ZipFile(tmp_path, "w", compression) as zf:
            for arcname, path in files:
                _write_entry(zf, arcname, path, compression, normalize)
        # mkstemp creates 0600; use the mode a plain open() would give
        os.chmod(tmp_path, 0o666 & ~_current_umask())
        os.replace(tmp_path, output_path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise OutputError(f"Cannot write output jar {output_path}: {e}", path=str(output_path)) from e
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise

    logger.info(f"Wrote {len(files)} entries to {output_path}")
    return len(files)


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def _write_entry(
    zf: zipfile.ZipFile,
    arcname: str,
    path: Path,
    compression: int,
    normalize: bool,
) -> None:
    """Copy one staged file into the jar."""
    if normalize:
        info = zipfile.ZipInfo(arcname, date_time=NORMALIZED_TIMESTAMP)
        info.create_system = 3
        info.external_attr = NORMALIZED_MODE << 16
    else:
        info = zipfile.ZipInfo.from_file(path, arcname)
    info.compress_type = compression

    with open(path, "rb") as src, zf.open(info, "w") as dst:
        shutil.copyfileobj(src, dst)

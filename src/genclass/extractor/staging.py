"""
Module: extractor.staging

Purpose:
    Scoped lifetime for the staging directory that holds included class
    files before they are repackaged. The directory is created fresh per
    run and removed recursively on every exit path.

Key Functions:
    - staging_directory: Context manager yielding the staging path
    - remove_tree: Best-effort recursive removal

Used By:
    - extractor.pipeline
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

logger = logging.getLogger(__name__)


def remove_tree(directory: Path) -> bool:
    """
    Recursively delete a directory.

    Failures are logged, never raised.

    Returns:
        True if the directory no longer exists.
    """
    if not directory.exists():
        return True
    try:
        shutil.rmtree(directory)
    except OSError as e:
        logger.warning(f"Failed to remove staging directory {directory}: {e}")
        return False
    logger.debug(f"Removed staging directory {directory}")
    return True


@contextmanager
def staging_directory(
    parent: Optional[Path] = None,
    prefix: str = "genclass-",
) -> Generator[Path, None, None]:
    """
    Create a fresh staging directory and remove it on exit.

    Args:
        parent: Directory to create the staging directory in. Defaults to
            the system temporary directory.
        prefix: Name prefix for the staging directory.

    Yields:
        Path to the empty staging directory.

    Example:
        >>> with staging_directory() as staging:
        ...     (staging / "a").mkdir()
    """
    if parent is not None:
        parent.mkdir(parents=True, exist_ok=True)
    directory = Path(tempfile.mkdtemp(prefix=prefix, dir=parent))
    logger.debug(f"Created staging directory {directory}")
    try:
        yield directory
    finally:
        remove_tree(directory)

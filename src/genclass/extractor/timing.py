"""
Module: extractor.timing

Purpose:
    Timing instrumentation for the genclass pipeline.

Key Classes:
    - TimingLog: Collects per-phase durations for one run

Key Functions:
    - timed_phase: Context manager for timing code blocks

Dependencies:
    - time (std)
    - contextlib (std)
    - portalocker: Lock on the shared JSONL timing file

Used By:
    - extractor.pipeline: Main orchestrator
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Generator

import portalocker

logger = logging.getLogger(__name__)


@dataclass
class TimingLog:
    """
    Per-phase timing for one genclass run.

    Attributes:
        phase_timings: Dict of phase_name -> duration_seconds, in run order

    Example:
        >>> log = TimingLog()
        >>> log.log_phase("classification", 0.042)
        >>> print(log.summary())
    """
    phase_timings: Dict[str, float] = field(default_factory=dict)

    def log_phase(self, phase: str, duration: float) -> None:
        """Log a phase duration, accumulating repeated phases."""
        self.phase_timings[phase] = self.phase_timings.get(phase, 0.0) + duration

    @property
    def total(self) -> float:
        return sum(self.phase_timings.values())

    def summary(self) -> str:
        """Generate human-readable timing summary."""
        lines = ["=== genclass Timing Summary ==="]
        for phase, duration in self.phase_timings.items():
            lines.append(f"  {phase:20s} {duration:.3f}s")
        lines.append(f"  {'total':20s} {self.total:.3f}s")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Export timing data as dictionary."""
        return {
            "phase_timings": dict(self.phase_timings),
            "total": self.total,
        }

    def append(self, path: Path, **context: Any) -> None:
        """
        Append this run's timings as one JSONL record.

        PARALLEL SAFE: the file is locked while the record is written, so
        concurrent genclass actions may share one timing file.

        Args:
            path: Path to JSONL file.
            **context: Extra fields stored with the record (e.g. output_jar).
        """
        record = {**context, **self.to_dict()}
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            portalocker.lock(f, portalocker.LOCK_EX)
            try:
                f.write(json.dumps(record, sort_keys=True) + "\n")
                f.flush()
            finally:
                portalocker.unlock(f)
        logger.debug(f"Appended timing data to {path}")


@contextmanager
def timed_phase(log: TimingLog, phase: str) -> Generator[None, None, None]:
    """
    Context manager for timing a pipeline phase.

    Example:
        >>> log = TimingLog()
        >>> with timed_phase(log, "prefix_index"):
        ...     index = build_prefix_index(manifest)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        log.log_phase(phase, time.perf_counter() - start)

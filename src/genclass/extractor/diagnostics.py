"""
Module: extractor.diagnostics

Records classification decisions during extraction and produces a JSON
report. The report lists entries that were included only because no
hand-written unit claims them, which is where misattribution of
third-party or synthetic classes shows up.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from .classification import Decision

logger = logging.getLogger(__name__)


@dataclass
class ClassificationReport:
    """
    Decisions collected over one pass of the class jar.

    Attributes:
        class_jar: Input jar the decisions were made for
        counts: Number of class files per decision
        skipped: Number of non-class entries ignored
        unattributed: Class names included by the fallback rule
    """
    class_jar: str = ""
    counts: Dict[str, int] = field(
        default_factory=lambda: {str(d): 0 for d in Decision}
    )
    skipped: int = 0
    unattributed: List[str] = field(default_factory=list)

    def record(self, class_name: str, decision: Decision) -> None:
        """Record the decision for one class file."""
        self.counts[str(decision)] += 1
        if decision is Decision.UNATTRIBUTED:
            self.unattributed.append(class_name)
            logger.debug(f"No compilation unit claims {class_name}; treating as generated")

    def record_skipped(self, entry_name: str) -> None:
        self.skipped += 1

    @property
    def total_classes(self) -> int:
        return sum(self.counts.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "class_jar": self.class_jar,
            "total_classes": self.total_classes,
            "counts": dict(sorted(self.counts.items())),
            "skipped_entries": self.skipped,
            "unattributed_classes": sorted(self.unattributed),
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json() + "\n", encoding="utf-8")
        logger.info(f"Classification report saved: {path}")

"""Accumulation of non-fatal problems found during a generation run."""

import json
import logging
import time
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

FILE_ERROR = "file_error"
MARKUP_ERROR = "markup_error"
EMPTY_NAME = "empty_name"
EMPTY_DOCUMENTATION = "empty_documentation"
PLUGIN_FAILURE = "plugin_failure"
DUPLICATE_PAGE = "duplicate_page"


@dataclass(frozen=True)
class ReportIssue:
    """One non-fatal problem: what kind, where, and the detail."""

    category: str
    subject: str
    message: str


class GenerationReport:
    """Collects issues as log entries instead of aborting the run."""

    def __init__(self) -> None:
        """Start an empty report and its timer."""
        self.issues: list[ReportIssue] = []
        self.pages_written = 0
        self.start_time = time.time()

    def add(self, category: str, subject: str, message: str) -> None:
        """Record an issue and log it at a level matching its category."""
        self.issues.append(ReportIssue(category, subject, message))
        if category in (
            FILE_ERROR,
            MARKUP_ERROR,
            EMPTY_NAME,
            PLUGIN_FAILURE,
            DUPLICATE_PAGE,
        ):
            logger.error("%s: %s", subject, message)
        else:
            logger.warning("%s: %s", subject, message)

    def by_category(self, category: str) -> list[ReportIssue]:
        return [i for i in self.issues if i.category == category]

    def generate_report(self, path: str) -> None:
        """Write the report as JSON."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "pages_written": self.pages_written,
                "total_issues": len(self.issues),
            },
            "issues": [
                {"category": i.category, "subject": i.subject, "message": i.message}
                for i in self.issues
            ],
            "stats": self._compute_stats(),
        }

        with open(path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2)

    def _compute_stats(self) -> dict[str, Any]:
        category_counts: dict[str, int] = {}
        for i in self.issues:
            category_counts[i.category] = category_counts.get(i.category, 0) + 1
        return {"category_counts": category_counts}

# enhancekit/pipeline/outcomes.py
"""
Per-artifact outcomes and the run summary.

Each phase processes one artifact at a time and returns a tagged result.
The phase loop inspects the tag to decide whether to continue or abort.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import List, Optional


class ArtifactOutcome(str, Enum):
    """Result of processing one artifact in one phase."""

    DISCOVERED = "discovered"
    REWRITTEN = "rewritten"
    UNCHANGED = "unchanged"
    FAILED = "failed"
    FATAL = "fatal"

    @property
    def is_failure(self) -> bool:
        return self in (ArtifactOutcome.FAILED, ArtifactOutcome.FATAL)


@dataclass
class ArtifactResult:
    """Outcome of one artifact in one phase."""

    path: Path
    outcome: ArtifactOutcome
    identity: Optional[str] = None
    error: Optional[BaseException] = None

    @property
    def detail(self) -> str:
        if self.error is None:
            return str(self.path)
        return f"{self.path}: {type(self.error).__name__}: {self.error}"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class RunSummary:
    """Summary of an enhancement run."""

    selected: int = 0
    skipped: int = 0  # non-artifact files matched by a rule
    discovered: int = 0
    discovery_failed: int = 0
    rewritten: int = 0
    unchanged: int = 0
    enhancement_failed: int = 0
    error_details: List[str] = field(default_factory=list)
    started_at: datetime = field(default_factory=_utcnow)
    finished_at: Optional[datetime] = None

    @property
    def errors(self) -> int:
        return self.discovery_failed + self.enhancement_failed

    @property
    def duration_seconds(self) -> float:
        """Get duration in seconds."""
        if self.finished_at is None:
            return 0.0
        return (self.finished_at - self.started_at).total_seconds()

    def record_discovery(self, result: ArtifactResult) -> None:
        if result.outcome is ArtifactOutcome.DISCOVERED:
            self.discovered += 1
        else:
            self.discovery_failed += 1
            self.error_details.append(f"Discovery error: {result.detail}")

    def record_enhancement(self, result: ArtifactResult) -> None:
        if result.outcome is ArtifactOutcome.REWRITTEN:
            self.rewritten += 1
        elif result.outcome is ArtifactOutcome.UNCHANGED:
            self.unchanged += 1
        else:
            self.enhancement_failed += 1
            self.error_details.append(f"Enhancement error: {result.detail}")

    def finish(self) -> None:
        self.finished_at = _utcnow()

    def __str__(self) -> str:
        return (
            f"selected {self.selected}, skipped {self.skipped}, "
            f"discovered {self.discovered}, rewritten {self.rewritten}, "
            f"unchanged {self.unchanged}, errors {self.errors}"
        )


__all__ = ["ArtifactOutcome", "ArtifactResult", "RunSummary"]

# tests/unit/test_outcomes.py
"""
Tests for enhancekit.pipeline.outcomes.
"""

from datetime import timedelta
from pathlib import Path

from enhancekit.pipeline.outcomes import ArtifactOutcome, ArtifactResult, RunSummary


class TestArtifactOutcome:
    def test_failure_outcomes(self):
        assert ArtifactOutcome.FAILED.is_failure
        assert ArtifactOutcome.FATAL.is_failure
        assert not ArtifactOutcome.REWRITTEN.is_failure
        assert not ArtifactOutcome.UNCHANGED.is_failure


class TestRunSummary:
    """Tests for RunSummary bookkeeping."""

    def test_records_each_outcome(self):
        summary = RunSummary()
        path = Path("/c/org/Bar.class")

        summary.record_discovery(ArtifactResult(path, ArtifactOutcome.DISCOVERED))
        summary.record_discovery(ArtifactResult(path, ArtifactOutcome.FAILED, error=OSError("gone")))
        summary.record_enhancement(ArtifactResult(path, ArtifactOutcome.REWRITTEN))
        summary.record_enhancement(ArtifactResult(path, ArtifactOutcome.UNCHANGED))
        summary.record_enhancement(ArtifactResult(path, ArtifactOutcome.FATAL, error=RuntimeError("x")))

        assert summary.discovered == 1
        assert summary.discovery_failed == 1
        assert summary.rewritten == 1
        assert summary.unchanged == 1
        assert summary.enhancement_failed == 1
        assert summary.errors == 2
        assert summary.error_details[0].startswith("Discovery error:")
        assert "OSError: gone" in summary.error_details[0]

    def test_duration(self):
        summary = RunSummary()
        assert summary.duration_seconds == 0.0

        summary.finished_at = summary.started_at + timedelta(seconds=2)
        assert summary.duration_seconds == 2.0

    def test_str(self):
        summary = RunSummary(selected=3, rewritten=2, unchanged=1)

        assert "selected 3" in str(summary)
        assert "rewritten 2" in str(summary)
        assert "errors 0" in str(summary)

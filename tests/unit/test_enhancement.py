# tests/unit/test_enhancement.py
"""
Tests for the enhancement phase: rewrite, no-change, failures and
timestamp restoration.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from enhancekit.core.context import EnhancementFlags, build_context
from enhancekit.core.exceptions import TransformationError, UnexpectedTransformError
from enhancekit.pipeline import enhancement
from enhancekit.pipeline.enhancement import enhance, enhance_artifact, restore_timestamp
from enhancekit.pipeline.outcomes import ArtifactOutcome, RunSummary
from enhancekit.selection.assembler import assemble, default_rules

from .helpers import ScriptedTransformer

OLD_TIME_NS = 1_500_000_000 * 10**9


def set_old_timestamp(path: Path) -> None:
    os.utime(path, ns=(OLD_TIME_NS, OLD_TIME_NS))


class TestEnhanceArtifact:
    """The call 1 / 2 / 3 scenario on org/foo/Bar.class."""

    def test_rewrite_then_no_change_then_failure(self, classes_dir: Path, caplog):
        bar = classes_dir / "org" / "foo" / "Bar.class"
        set_old_timestamp(bar)
        transformer = ScriptedTransformer(
            enhance_script={
                "org.foo.Bar": [b"enhanced", None, TransformationError("cannot enhance")],
            }
        )

        # call 1: new bytes are written, timestamp restored
        first = enhance_artifact(bar, classes_dir, transformer)
        assert first.outcome is ArtifactOutcome.REWRITTEN
        assert bar.read_bytes() == b"enhanced"
        assert bar.stat().st_mtime_ns == OLD_TIME_NS

        # call 2: no change, nothing written
        second = enhance_artifact(bar, classes_dir, transformer)
        assert second.outcome is ArtifactOutcome.UNCHANGED
        assert bar.read_bytes() == b"enhanced"
        assert bar.stat().st_mtime_ns == OLD_TIME_NS

        # call 3: failure logged, file untouched
        third = enhance_artifact(bar, classes_dir, transformer)
        assert third.outcome is ArtifactOutcome.FAILED
        assert isinstance(third.error, TransformationError)
        assert bar.read_bytes() == b"enhanced"
        assert bar.stat().st_mtime_ns == OLD_TIME_NS
        assert "An exception occurred while trying to enhance class file" in caplog.text

        assert transformer.enhanced == ["org.foo.Bar"] * 3

    def test_unexpected_error_is_fatal(self, classes_dir: Path):
        bar = classes_dir / "org" / "foo" / "Bar.class"
        transformer = ScriptedTransformer(enhance_script={"org.foo.Bar": [RuntimeError("bug")]})

        result = enhance_artifact(bar, classes_dir, transformer)

        assert result.outcome is ArtifactOutcome.FATAL
        assert result.identity == "org.foo.Bar"

    def test_non_bytes_result_is_fatal_and_file_untouched(self, classes_dir: Path):
        """Test that a str result is rejected before the file is cleared."""
        bar = classes_dir / "org" / "foo" / "Bar.class"
        set_old_timestamp(bar)
        transformer = ScriptedTransformer(enhance_script={"org.foo.Bar": ["not-bytes"]})

        result = enhance_artifact(bar, classes_dir, transformer)

        assert result.outcome is ArtifactOutcome.FATAL
        assert isinstance(result.error, TypeError)
        assert bar.read_bytes() == b"\xca\xfe\xba\xbe-bar"
        assert bar.stat().st_mtime_ns == OLD_TIME_NS

    def test_value_error_from_transformer_is_fatal(self, classes_dir: Path):
        bar = classes_dir / "org" / "foo" / "Bar.class"
        transformer = ScriptedTransformer(enhance_script={"org.foo.Bar": [ValueError("bad constant")]})

        result = enhance_artifact(bar, classes_dir, transformer)

        assert result.outcome is ArtifactOutcome.FATAL

    def test_unexpected_rewrite_error_is_fatal(self, classes_dir: Path, monkeypatch):
        bar = classes_dir / "org" / "foo" / "Bar.class"
        set_old_timestamp(bar)

        def broken_rewrite(target, data):
            raise RuntimeError("encoder bug")

        monkeypatch.setattr(enhancement, "rewrite_artifact", broken_rewrite)
        transformer = ScriptedTransformer(enhance_script={"org.foo.Bar": [b"new"]})

        result = enhance_artifact(bar, classes_dir, transformer)

        assert result.outcome is ArtifactOutcome.FATAL
        assert bar.stat().st_mtime_ns == OLD_TIME_NS

    def test_timestamp_restored_when_interrupted(self, classes_dir: Path):
        bar = classes_dir / "org" / "foo" / "Bar.class"
        set_old_timestamp(bar)
        transformer = ScriptedTransformer(enhance_script={"org.foo.Bar": [KeyboardInterrupt()]})

        with pytest.raises(KeyboardInterrupt):
            enhance_artifact(bar, classes_dir, transformer)

        assert bar.stat().st_mtime_ns == OLD_TIME_NS

    def test_missing_file_fails(self, classes_dir: Path):
        result = enhance_artifact(classes_dir / "org" / "Gone.class", classes_dir, ScriptedTransformer())

        assert result.outcome is ArtifactOutcome.FAILED
        assert isinstance(result.error, OSError)

    def test_no_change_is_logged(self, classes_dir: Path, caplog):
        caplog.set_level(logging.INFO)

        enhance_artifact(classes_dir / "org" / "foo" / "Bar.class", classes_dir, ScriptedTransformer())

        assert "Skipping file" in caplog.text


class TestRestoreTimestamp:
    def test_restores_captured_times(self, classes_dir: Path):
        bar = classes_dir / "org" / "foo" / "Bar.class"
        set_old_timestamp(bar)
        before = os.stat(bar)
        bar.write_bytes(b"touched")

        assert restore_timestamp(bar, before)
        assert bar.stat().st_mtime_ns == OLD_TIME_NS

    def test_failure_is_reported_not_raised(self, classes_dir: Path, caplog):
        caplog.set_level(logging.DEBUG)
        before = os.stat(classes_dir / "org" / "foo" / "Bar.class")

        assert not restore_timestamp(classes_dir / "Gone.class", before)
        assert "Setting lastModified failed" in caplog.text


class TestEnhance:
    """Tests for the phase loop."""

    def test_failure_does_not_stop_other_artifacts(self, mixed_classes_dir: Path):
        context = build_context(mixed_classes_dir, EnhancementFlags())
        source_set = assemble(default_rules(mixed_classes_dir), mixed_classes_dir)
        transformer = ScriptedTransformer(
            context,
            enhance_script={
                "org.baz.Baz": [TransformationError("bad")],
                "org.foo.Bar": [b"new-bar"],
            },
        )
        summary = RunSummary()

        results = enhance(source_set, context, transformer, summary)

        assert [r.outcome for r in results] == [
            ArtifactOutcome.FAILED,
            ArtifactOutcome.REWRITTEN,
            ArtifactOutcome.UNCHANGED,
        ]
        assert (mixed_classes_dir / "org" / "foo" / "Bar.class").read_bytes() == b"new-bar"
        assert (mixed_classes_dir / "org" / "baz" / "Baz.class").read_bytes() == b"baz"
        assert summary.rewritten == 1
        assert summary.unchanged == 1
        assert summary.enhancement_failed == 1

    def test_unexpected_error_stops_the_phase(self, mixed_classes_dir: Path):
        context = build_context(mixed_classes_dir, EnhancementFlags())
        source_set = assemble(default_rules(mixed_classes_dir), mixed_classes_dir)
        cause = RuntimeError("transformer bug")
        transformer = ScriptedTransformer(
            context,
            enhance_script={"org.baz.Baz": [cause], "org.foo.Bar": [b"never written"]},
        )
        summary = RunSummary()

        with pytest.raises(UnexpectedTransformError) as exc_info:
            enhance(source_set, context, transformer, summary)

        assert exc_info.value.identity == "org.baz.Baz"
        assert exc_info.value.__cause__ is cause
        assert "RuntimeError: transformer bug" in str(exc_info.value)
        assert transformer.enhanced == ["org.baz.Baz"]
        assert (mixed_classes_dir / "org" / "foo" / "Bar.class").read_bytes() == b"bar"
        assert summary.enhancement_failed == 1

# tests/unit/test_runner.py
"""
Tests for enhancekit.pipeline.runner.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from enhancekit.config.schema import EnhanceConfig, SelectionRule, TransformerConfig
from enhancekit.core.exceptions import SelectionError, TransformationError, UnexpectedTransformError
from enhancekit.core.registry import PluginNotFoundError
from enhancekit.pipeline.runner import EnhanceRunner, list_source_set, run_enhance

from .helpers import ScriptedTransformer


class TestEnhanceRunner:
    """Tests for EnhanceRunner."""

    def test_full_run_with_injected_transformer(self, classes_dir: Path):
        created = []

        def factory(context):
            transformer = ScriptedTransformer(context, enhance_script={"org.foo.Bar": [b"enhanced"]})
            created.append(transformer)
            return transformer

        summary = run_enhance(EnhanceConfig(classes_directory=classes_dir), transformer_factory=factory)

        assert summary.selected == 1
        assert summary.skipped == 1
        assert summary.discovered == 1
        assert summary.rewritten == 1
        assert summary.errors == 0
        assert summary.finished_at is not None
        assert created[0].discovered == ["org.foo.Bar"]
        assert (classes_dir / "org" / "foo" / "Bar.class").read_bytes() == b"enhanced"

    def test_discovery_completes_before_enhancement(self, mixed_classes_dir: Path):
        order = []

        class Recording(ScriptedTransformer):
            def discover_types(self, identity, data):
                order.append(("discover", identity))

            def enhance(self, identity, data):
                order.append(("enhance", identity))
                return None

        run_enhance(EnhanceConfig(classes_directory=mixed_classes_dir), transformer_factory=Recording)

        phases = [phase for phase, _ in order]
        assert phases == ["discover"] * 3 + ["enhance"] * 3

    def test_flags_reach_the_transformer(self, classes_dir: Path):
        seen = {}

        def factory(context):
            seen["dirty"] = context.do_dirty_checking_inline("org.foo.Bar")
            seen["lazy"] = context.is_lazy_loadable("org.foo.Bar")
            return ScriptedTransformer(context)

        config = EnhanceConfig(classes_directory=classes_dir, enable_dirty_tracking=True)
        run_enhance(config, transformer_factory=factory)

        assert seen == {"dirty": True, "lazy": False}

    def test_default_plugin_is_passthrough(self, classes_dir: Path):
        before = (classes_dir / "org" / "foo" / "Bar.class").read_bytes()

        summary = run_enhance(EnhanceConfig(classes_directory=classes_dir))

        assert summary.unchanged == 1
        assert summary.rewritten == 0
        assert (classes_dir / "org" / "foo" / "Bar.class").read_bytes() == before

    def test_configured_file_sets_replace_default(self, mixed_classes_dir: Path):
        config = EnhanceConfig(
            classes_directory=mixed_classes_dir,
            file_sets=[SelectionRule(excludes=["**/baz/**"])],
        )

        runner = EnhanceRunner(config)

        assert [p.name for p in runner.assemble_source_set()] == ["Bar.class", "Foo.class"]

    def test_empty_file_sets_selects_nothing(self, mixed_classes_dir: Path):
        config = EnhanceConfig(classes_directory=mixed_classes_dir, file_sets=[])

        assert len(list_source_set(config)) == 0

    def test_missing_classes_directory_is_fatal(self, tmp_path: Path):
        with pytest.raises(SelectionError):
            run_enhance(EnhanceConfig(classes_directory=tmp_path / "missing"))

    def test_unknown_plugin_is_fatal(self, classes_dir: Path):
        config = EnhanceConfig(
            classes_directory=classes_dir,
            transformer=TransformerConfig(plugin_name="does-not-exist"),
        )

        with pytest.raises(PluginNotFoundError):
            run_enhance(config)


    def test_discovery_failure_does_not_block_enhancement(self, mixed_classes_dir: Path):
        """Test that an artifact failing discovery leaves the others enhanceable."""
        created = []

        def factory(context):
            transformer = ScriptedTransformer(
                context,
                enhance_script={"org.foo.Bar": [b"new"]},
                discover_errors={"org.baz.Baz": TransformationError("unreadable")},
            )
            created.append(transformer)
            return transformer

        summary = run_enhance(EnhanceConfig(classes_directory=mixed_classes_dir), transformer_factory=factory)

        assert summary.discovery_failed == 1
        assert summary.rewritten == 1
        assert summary.errors == 1
        assert created[0].enhanced == ["org.baz.Baz", "org.foo.Bar", "org.foo.Foo"]
        assert (mixed_classes_dir / "org" / "foo" / "Bar.class").read_bytes() == b"new"

    def test_non_bytes_result_raises_unexpected_transform_error(self, classes_dir: Path):
        def factory(context):
            return ScriptedTransformer(context, enhance_script={"org.foo.Bar": ["not-bytes"]})

        with pytest.raises(UnexpectedTransformError) as exc_info:
            run_enhance(EnhanceConfig(classes_directory=classes_dir), transformer_factory=factory)

        assert exc_info.value.identity == "org.foo.Bar"
        assert isinstance(exc_info.value.__cause__, TypeError)
        assert (classes_dir / "org" / "foo" / "Bar.class").read_bytes() == b"\xca\xfe\xba\xbe-bar"


class TestListSourceSet:
    def test_nothing_is_written(self, classes_dir: Path):
        bar = classes_dir / "org" / "foo" / "Bar.class"
        mtime = bar.stat().st_mtime_ns

        source_set = list_source_set(EnhanceConfig(classes_directory=classes_dir))

        assert list(source_set) == [bar]
        assert bar.stat().st_mtime_ns == mtime

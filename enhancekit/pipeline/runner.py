# enhancekit/pipeline/runner.py
"""
Orchestrates one enhancement run.

    parameters -> source set -> context -> transformer -> discovery -> enhancement

Usage:
    from enhancekit.config import load_enhance_config
    from enhancekit.pipeline import run_enhance

    summary = run_enhance(load_enhance_config("enhance.yaml"))
    print(summary)

Fatal errors (SelectionError, ContextBuildError, PluginNotFoundError,
UnexpectedTransformError) propagate to the caller. Per-artifact failures are
counted in the returned RunSummary.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from enhancekit.config.schema import EnhanceConfig, SelectionRule
from enhancekit.core.context import EnhancementContext, build_context
from enhancekit.logging.logger import get_logger
from enhancekit.pipeline.discovery import discover
from enhancekit.pipeline.enhancement import enhance
from enhancekit.pipeline.outcomes import RunSummary
from enhancekit.selection.assembler import SourceSet, assemble, default_rules
from enhancekit.transform import build_transformer, transformer_scope
from enhancekit.transform.base import Transformer

logger = get_logger(__name__)

TransformerFactory = Callable[[EnhancementContext], Transformer]


class EnhanceRunner:
    """
    Runs discovery and enhancement over the configured artifacts.

    Args:
        config: Run configuration.
        transformer_factory: Builds the transformer from the run's context.
            Defaults to the registry plugin named in config.transformer.
    """

    def __init__(
        self,
        config: EnhanceConfig,
        transformer_factory: Optional[TransformerFactory] = None,
    ) -> None:
        self._config = config
        self._transformer_factory = transformer_factory

    def selection_rules(self) -> List[SelectionRule]:
        """Configured rules, or the whole-root rule when none are configured."""
        if self._config.file_sets is None:
            return default_rules(self._config.classes_directory)
        return list(self._config.file_sets)

    def assemble_source_set(self) -> SourceSet:
        return assemble(self.selection_rules(), self._config.classes_directory)

    def create_context(self) -> EnhancementContext:
        parent = None
        if self._transformer_factory is None:
            parent = transformer_scope(self._config.transformer.plugin_name)
        return build_context(self._config.classes_directory, self._config.flags, parent=parent)

    def create_transformer(self, context: EnhancementContext) -> Transformer:
        if self._transformer_factory is not None:
            return self._transformer_factory(context)
        return build_transformer(
            self._config.transformer.plugin_name,
            context,
            **self._config.transformer.kwargs,
        )

    def run(self) -> RunSummary:
        logger.debug("Starting execution of enhance run")
        summary = RunSummary()

        source_set = self.assemble_source_set()
        summary.selected = len(source_set)
        summary.skipped = len(source_set.skipped)

        context = self.create_context()
        transformer = self.create_transformer(context)

        discover(source_set, context, transformer, summary)
        enhance(source_set, context, transformer, summary)

        summary.finish()
        logger.info(f"Enhancement complete: {summary}")
        logger.debug("Ending execution of enhance run")
        return summary


def run_enhance(
    config: EnhanceConfig,
    transformer_factory: Optional[TransformerFactory] = None,
) -> RunSummary:
    """Convenience function to run one enhancement."""
    return EnhanceRunner(config, transformer_factory).run()


def list_source_set(config: EnhanceConfig) -> SourceSet:
    """Assemble the source set only; nothing is read or written."""
    return EnhanceRunner(config).assemble_source_set()


__all__ = ["TransformerFactory", "EnhanceRunner", "run_enhance", "list_source_set"]

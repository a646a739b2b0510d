# enhancekit/__init__.py
"""
enhancekit - post-compilation enhancement of class files.

Selects compiled class files with declarative file sets, builds a resolution
context over the classes directory, and drives a transformer through two
passes: type discovery over every file, then in-place enhancement with the
original timestamps restored.

Quick Start:
    >>> from enhancekit import EnhanceConfig, run_enhance
    >>> summary = run_enhance(EnhanceConfig(classes_directory="target/classes"))
    >>> print(summary)

Public API:
    Configuration:
        - EnhanceConfig, SelectionRule, TransformerConfig
        - load_enhance_config

    Running:
        - run_enhance: one full run, returns a RunSummary
        - EnhanceRunner: the same, step by step
        - list_source_set: selection only (dry run)

    Extending:
        - Transformer: protocol implemented by transformer plugins
        - register_transformer_plugin
"""

from enhancekit.config import (
    ConfigError,
    EnhanceConfig,
    SelectionRule,
    TransformerConfig,
    load_enhance_config,
)
from enhancekit.core import (
    ContextBuildError,
    EnhanceError,
    EnhancementContext,
    EnhancementFlags,
    SelectionError,
    TransformationError,
    UnexpectedTransformError,
)
from enhancekit.core.registry import available_transformer_plugins, register_transformer_plugin
from enhancekit.pipeline import EnhanceRunner, RunSummary, list_source_set, run_enhance
from enhancekit.selection import SourceSet
from enhancekit.transform.base import Transformer

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigError",
    "EnhanceConfig",
    "SelectionRule",
    "TransformerConfig",
    "load_enhance_config",
    "ContextBuildError",
    "EnhanceError",
    "EnhancementContext",
    "EnhancementFlags",
    "SelectionError",
    "TransformationError",
    "UnexpectedTransformError",
    "available_transformer_plugins",
    "register_transformer_plugin",
    "EnhanceRunner",
    "RunSummary",
    "list_source_set",
    "run_enhance",
    "SourceSet",
    "Transformer",
]

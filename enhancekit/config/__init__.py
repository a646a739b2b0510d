# enhancekit/config/__init__.py
"""
Configuration for enhancement runs.

Usage:
    from enhancekit.config import load_enhance_config

    config = load_enhance_config("enhance.yaml")
    config.classes_directory   # always set
    config.flags               # EnhancementFlags
"""

from enhancekit.config.loader import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    load_enhance_config,
)
from enhancekit.config.schema import EnhanceConfig, SelectionRule, TransformerConfig

__all__ = [
    "EnhanceConfig",
    "SelectionRule",
    "TransformerConfig",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "load_enhance_config",
]

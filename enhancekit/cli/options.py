# enhancekit/cli/options.py
"""
Build an EnhanceConfig from a config file and command-line overrides.

Command-line values win over the file. Include or exclude patterns given on
the command line replace the configured file sets with a single rule over
the classes directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from enhancekit.config.loader import ConfigValidationError, load_enhance_config
from enhancekit.config.schema import EnhanceConfig, SelectionRule, TransformerConfig
from enhancekit.logging.logger import get_logger
from enhancekit.logging.tags import CLI

logger = get_logger(__name__)


def build_config(
    config_path: Optional[Path] = None,
    classes_dir: Optional[Path] = None,
    includes: Optional[List[str]] = None,
    excludes: Optional[List[str]] = None,
    association_management: Optional[bool] = None,
    dirty_tracking: Optional[bool] = None,
    lazy_initialization: Optional[bool] = None,
    extended_enhancement: Optional[bool] = None,
    transformer: Optional[str] = None,
) -> EnhanceConfig:
    """
    Merge a config file (optional) with command-line overrides.

    Raises:
        ConfigError: If the file is invalid, or no classes directory is known.
    """
    if config_path is not None:
        config = load_enhance_config(config_path)
        logger.debug(f"{CLI} Using config file {config_path}")
    elif classes_dir is not None:
        config = EnhanceConfig(classes_directory=classes_dir)
    else:
        raise ConfigValidationError("classes_directory is required (use --config or --classes-dir)")

    updates: Dict[str, Any] = {}
    if classes_dir is not None:
        updates["classes_directory"] = classes_dir.absolute()
    if includes or excludes:
        updates["file_sets"] = [SelectionRule(includes=includes or [], excludes=excludes or [])]

    flag_overrides = {
        "enable_association_management": association_management,
        "enable_dirty_tracking": dirty_tracking,
        "enable_lazy_initialization": lazy_initialization,
        "enable_extended_enhancement": extended_enhancement,
    }
    updates.update({k: v for k, v in flag_overrides.items() if v is not None})

    if transformer is not None and transformer != config.transformer.plugin_name:
        updates["transformer"] = TransformerConfig(plugin_name=transformer)

    return config.model_copy(update=updates)


__all__ = ["build_config"]

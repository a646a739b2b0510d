# enhancekit/config/loader.py
"""
YAML configuration loading.

Usage:
    from enhancekit.config.loader import load_enhance_config, ConfigError

    config = load_enhance_config("enhance.yaml")

Relative paths in the file (classes_directory, file_sets[].directory) are
resolved against the directory that holds the config file, so a config
checked in next to a build file works from any working directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from enhancekit.config.schema import EnhanceConfig
from enhancekit.logging.logger import get_logger
from enhancekit.logging.tags import CONFIG

logger = get_logger(__name__)


# =============================================================================
# Errors
# =============================================================================


class ConfigError(Exception):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match schema."""

    pass


# =============================================================================
# Loading
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return as dictionary.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e
    except OSError as e:
        raise ConfigParseError(f"Failed to read config: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"{CONFIG} Loaded config from {p}")
    return data


def _anchor(value: Any, base: Path) -> Any:
    if isinstance(value, str) and value and not Path(value).is_absolute():
        return str(base / value)
    return value


def _anchor_paths(data: Dict[str, Any], base: Path) -> Dict[str, Any]:
    """Resolve relative directories against the config file's directory."""
    result = dict(data)
    if "classes_directory" in result:
        result["classes_directory"] = _anchor(result["classes_directory"], base)

    file_sets = result.get("file_sets")
    if isinstance(file_sets, list):
        anchored = []
        for entry in file_sets:
            if isinstance(entry, dict) and "directory" in entry:
                entry = {**entry, "directory": _anchor(entry["directory"], base)}
            anchored.append(entry)
        result["file_sets"] = anchored

    return result


def load_enhance_config(path: Union[str, Path]) -> EnhanceConfig:
    """
    Load and validate an enhancement config file.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid
        ConfigValidationError: If the content doesn't match EnhanceConfig
    """
    p = Path(path)
    data = _anchor_paths(load_yaml(p), p.absolute().parent)

    try:
        return EnhanceConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration: {e}", path=p) from e


__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "load_yaml",
    "load_enhance_config",
]

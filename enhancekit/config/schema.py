# enhancekit/config/schema.py
"""
Configuration schema for enhancekit.

This is the SINGLE source of truth for run configuration.

Schema hierarchy:
- EnhanceConfig: The main config consumed by the runner
- SelectionRule: One file set (base directory + include/exclude globs)
- TransformerConfig: Which transformer plugin to build, and its kwargs

Example YAML:
    classes_directory: target/classes
    file_sets:
      - directory: target/classes
        includes: ["**/*.class"]
        excludes: ["**/generated/**"]
    enable_dirty_tracking: true
    transformer:
      plugin_name: passthrough
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from enhancekit.core.context import EnhancementFlags


class SelectionRule(BaseModel):
    """
    One declarative file set.

    Examples:
        >>> SelectionRule(includes=["**/*.class"], excludes=["**/baz/**"])
    """

    directory: Optional[Path] = Field(
        default=None, description="Base directory; defaults to the artifact root"
    )
    includes: List[str] = Field(
        default_factory=list, description="Glob patterns to include (empty = everything)"
    )
    excludes: List[str] = Field(default_factory=list, description="Glob patterns to exclude")
    use_default_excludes: bool = Field(
        default=True, description="Also exclude SCM and editor files (.git, *~, ...)"
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("includes", "excludes", mode="before")
    @classmethod
    def normalize_patterns(cls, v: Any) -> Any:
        """Accept a single pattern string and use '/' as the separator."""
        if v is None:
            return []
        if isinstance(v, str):
            v = [v]
        if isinstance(v, (list, tuple)):
            return [p.replace("\\", "/") if isinstance(p, str) else p for p in v]
        return v


class TransformerConfig(BaseModel):
    """Transformer plugin selection."""

    plugin_name: str = Field(default="passthrough", description="Transformer plugin name")
    kwargs: dict[str, Any] = Field(default_factory=dict, description="Plugin init kwargs")

    model_config = ConfigDict(extra="forbid")


class EnhanceConfig(BaseModel):
    """
    Central configuration for one enhancement run.

    Engines MUST NOT own config.
    The runner is BUILT FROM this config.
    """

    classes_directory: Path = Field(..., description="Root directory of compiled artifacts")
    file_sets: Optional[List[SelectionRule]] = Field(
        default=None, description="Selection rules; None selects the whole root"
    )
    enable_association_management: bool = False
    enable_dirty_tracking: bool = False
    enable_lazy_initialization: bool = False
    enable_extended_enhancement: bool = False
    transformer: TransformerConfig = Field(default_factory=TransformerConfig)

    model_config = ConfigDict(extra="forbid")

    @property
    def flags(self) -> EnhancementFlags:
        return EnhancementFlags(
            association_management=self.enable_association_management,
            dirty_tracking=self.enable_dirty_tracking,
            lazy_initialization=self.enable_lazy_initialization,
            extended_enhancement=self.enable_extended_enhancement,
        )


__all__ = ["SelectionRule", "TransformerConfig", "EnhanceConfig"]

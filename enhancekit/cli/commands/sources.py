# enhancekit/cli/commands/sources.py
"""
Show the source set a run would process, without touching any file.

Usage:
    enhancekit sources --config enhance.yaml
    enhancekit sources --classes-dir target/classes --exclude "**/generated/**"
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from enhancekit.cli.errors import friendly_errors
from enhancekit.cli.options import build_config
from enhancekit.cli.ui import console, ui
from enhancekit.core.artifacts import determine_identity
from enhancekit.logging.logger import configure_logging
from enhancekit.pipeline.runner import list_source_set


@friendly_errors
def command(
    config_path: Optional[Path],
    classes_dir: Optional[Path],
    includes: Optional[List[str]],
    excludes: Optional[List[str]],
    verbose: bool,
) -> None:
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    config = build_config(
        config_path=config_path,
        classes_dir=classes_dir,
        includes=includes,
        excludes=excludes,
    )
    source_set = list_source_set(config)

    for path in source_set:
        try:
            identity = determine_identity(source_set.root, path)
        except ValueError:
            identity = "?"
        console.print(f"{path}  [dim]{identity}[/dim]")

    ui.info(f"{len(source_set)} class file(s), {len(source_set.skipped)} other file(s) skipped")

# enhancekit/cli/commands/run.py
"""
Run discovery and enhancement over the selected class files.

Usage:
    enhancekit run --config enhance.yaml
    enhancekit run --classes-dir target/classes --dirty-tracking
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from enhancekit.cli.errors import friendly_errors
from enhancekit.cli.options import build_config
from enhancekit.cli.ui import ui
from enhancekit.logging.logger import configure_logging, get_logger
from enhancekit.logging.tags import CLI
from enhancekit.pipeline.runner import run_enhance

logger = get_logger(__name__)


@friendly_errors
def command(
    config_path: Optional[Path],
    classes_dir: Optional[Path],
    includes: Optional[List[str]],
    excludes: Optional[List[str]],
    association_management: Optional[bool],
    dirty_tracking: Optional[bool],
    lazy_initialization: Optional[bool],
    extended_enhancement: Optional[bool],
    transformer: Optional[str],
    verbose: bool,
) -> None:
    configure_logging(logging.DEBUG if verbose else logging.INFO)

    config = build_config(
        config_path=config_path,
        classes_dir=classes_dir,
        includes=includes,
        excludes=excludes,
        association_management=association_management,
        dirty_tracking=dirty_tracking,
        lazy_initialization=lazy_initialization,
        extended_enhancement=extended_enhancement,
        transformer=transformer,
    )

    ui.header("enhancekit run", str(config.classes_directory))
    logger.info(
        f"{CLI} Enhancing {config.classes_directory} "
        f"(transformer='{config.transformer.plugin_name}')"
    )

    summary = run_enhance(config)

    ui.summary_table(summary)
    if summary.errors:
        ui.warning(f"{summary.errors} artifact(s) failed", "see the log for details")
    else:
        ui.success("Enhancement finished")

# enhancekit/logging/logger.py
"""
Unified logging setup for enhancekit.

All modules use:
    from enhancekit.logging.logger import get_logger
    logger = get_logger(__name__)

Configuration (format, level, handlers) happens once, in configure_logging(),
which the CLI calls at startup. Library callers keep their own logging setup.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

DEFAULT_FORMAT = "[%(levelname)s] %(name)s — %(message)s"


def configure_logging(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure the root logging handler.

    Safe to call multiple times; only one handler is ever added.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Modules call this to get a logger.

    Do NOT configure logging here; configuration happens in configure_logging().
    """
    return logging.getLogger(name)

# enhancekit/cli/commands/plugins.py
"""List registered transformer plugins."""

from __future__ import annotations

from enhancekit.cli.errors import friendly_errors
from enhancekit.cli.ui import console
from enhancekit.core.registry import available_transformer_plugins


@friendly_errors
def command() -> None:
    for name in available_transformer_plugins():
        console.print(name)

# enhancekit/cli/errors.py
"""
Error handling for the enhancekit CLI.

Fatal run errors are shown as a short panel with suggested fixes and turn
into exit code 1. Unknown exceptions get a generic panel; set
ENHANCEKIT_DEBUG=1 to include the traceback.
"""

from __future__ import annotations

import functools
import os
import traceback
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple, Type, TypeVar

import typer
from rich.panel import Panel

from enhancekit.cli.ui import err_console
from enhancekit.config.loader import ConfigError
from enhancekit.core.exceptions import (
    ContextBuildError,
    SelectionError,
    UnexpectedTransformError,
)
from enhancekit.core.registry import PluginRegistryError

# =============================================================================
# Known Errors
# =============================================================================


@dataclass
class ErrorFix:
    """A suggested fix for an error."""

    title: str
    description: str
    commands: List[str] = field(default_factory=list)


@dataclass
class KnownError:
    """Presentation of one fatal error type."""

    error_type: Type[BaseException]
    title: str
    fixes: List[ErrorFix]


KNOWN_ERRORS: List[KnownError] = [
    KnownError(
        SelectionError,
        "File Set Could Not Be Resolved",
        [
            ErrorFix(
                "Check the base directory",
                "Every file set directory must exist before enhancement runs:",
                ["enhancekit sources --config enhance.yaml"],
            ),
        ],
    ),
    KnownError(
        ContextBuildError,
        "Classes Directory Unusable",
        [
            ErrorFix(
                "Compile first",
                "The classes directory must exist and be a directory.",
            ),
        ],
    ),
    KnownError(
        ConfigError,
        "Configuration Error",
        [
            ErrorFix(
                "Check config syntax",
                "classes_directory is required; file_sets, flags and transformer are optional.",
            ),
        ],
    ),
    KnownError(
        PluginRegistryError,
        "Transformer Not Available",
        [
            ErrorFix(
                "List transformers",
                "Use one of the registered transformer plugins:",
                ["enhancekit plugins"],
            ),
        ],
    ),
    KnownError(
        UnexpectedTransformError,
        "Transformer Failed",
        [
            ErrorFix(
                "Inspect the artifact",
                "The transformer raised an error outside its recoverable class; "
                "remaining artifacts were not enhanced.",
            ),
        ],
    ),
]


def match_error(exc: BaseException) -> Optional[KnownError]:
    for known in KNOWN_ERRORS:
        if isinstance(exc, known.error_type):
            return known
    return None


# =============================================================================
# Display
# =============================================================================


def display_error(title: str, description: str, fixes: List[ErrorFix], original_error: str | None = None) -> None:
    """Display an error panel on stderr."""
    lines = [description, ""]
    if fixes:
        lines.append("[bold]How to fix:[/bold]")
        for i, fix in enumerate(fixes, 1):
            lines.append(f"[bold]{i}. {fix.title}[/bold]")
            lines.append(f"   {fix.description}")
            for cmd in fix.commands:
                lines.append(f"   [dim]$[/dim] [cyan]{cmd}[/cyan]")

    err_console.print(Panel("\n".join(lines), title=f"❌ {title}", border_style="red", expand=False))

    if original_error and os.getenv("ENHANCEKIT_DEBUG"):
        err_console.print(f"\n[dim]Original error: {original_error}[/dim]")


def handle_exception(exc: Exception) -> None:
    known = match_error(exc)
    if known is not None:
        display_error(known.title, str(exc), known.fixes, traceback.format_exc())
        return

    display_error(
        f"Unexpected Error: {type(exc).__name__}",
        str(exc),
        [
            ErrorFix(
                "Check the logs",
                "Run with ENHANCEKIT_DEBUG=1 and --verbose for more details.",
            )
        ],
        traceback.format_exc(),
    )


# =============================================================================
# Decorator for CLI Commands
# =============================================================================

F = TypeVar("F", bound=Callable[..., Any])

PASSTHROUGH: Tuple[Type[BaseException], ...] = (typer.Exit, typer.Abort)


def friendly_errors(func: F) -> F:
    """
    Wrap a CLI command: fatal errors become a panel and exit code 1.

    Usage:
        @friendly_errors
        def command(...):
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except PASSTHROUGH:
            raise
        except KeyboardInterrupt:
            err_console.print("\n\nOperation cancelled by user.")
            raise typer.Exit(code=130)
        except Exception as exc:
            handle_exception(exc)
            raise typer.Exit(code=1)

    return wrapper  # type: ignore


__all__ = ["ErrorFix", "KnownError", "KNOWN_ERRORS", "match_error", "display_error", "friendly_errors"]

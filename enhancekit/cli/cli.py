# enhancekit/cli/cli.py
"""
enhancekit CLI - Main application.

Commands:
    enhancekit run        Discover and enhance compiled class files
    enhancekit sources    Show which files a run would process
    enhancekit plugins    List available transformer plugins

NOTE: Commands use lazy loading - the pipeline is only imported when a command is invoked.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

app = typer.Typer(
    name="enhancekit",
    help="Post-compilation bytecode enhancement. Start with: enhancekit run --classes-dir target/classes",
    no_args_is_help=True,
    add_completion=False,
)


# =============================================================================
# LAZY COMMANDS
# =============================================================================


@app.command("run")
def run(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML run configuration."),
    classes_dir: Optional[Path] = typer.Option(None, "--classes-dir", help="Compiled classes directory."),
    include: Optional[List[str]] = typer.Option(None, "--include", help="Include pattern (repeatable)."),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", help="Exclude pattern (repeatable)."),
    association_management: Optional[bool] = typer.Option(
        None, "--association-management/--no-association-management", help="Bidirectional association management."
    ),
    dirty_tracking: Optional[bool] = typer.Option(
        None, "--dirty-tracking/--no-dirty-tracking", help="Inline dirty tracking."
    ),
    lazy_initialization: Optional[bool] = typer.Option(
        None, "--lazy-initialization/--no-lazy-initialization", help="Lazy attribute loading."
    ),
    extended_enhancement: Optional[bool] = typer.Option(
        None, "--extended-enhancement/--no-extended-enhancement", help="Enhance field access outside entities."
    ),
    transformer: Optional[str] = typer.Option(None, "--transformer", "-t", help="Transformer plugin name."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """Discover and enhance compiled class files in place."""
    from enhancekit.cli.commands import run as mod

    mod.command(
        config_path=config_path,
        classes_dir=classes_dir,
        includes=include,
        excludes=exclude,
        association_management=association_management,
        dirty_tracking=dirty_tracking,
        lazy_initialization=lazy_initialization,
        extended_enhancement=extended_enhancement,
        transformer=transformer,
        verbose=verbose,
    )


@app.command("sources")
def sources(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML run configuration."),
    classes_dir: Optional[Path] = typer.Option(None, "--classes-dir", help="Compiled classes directory."),
    include: Optional[List[str]] = typer.Option(None, "--include", help="Include pattern (repeatable)."),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", help="Exclude pattern (repeatable)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """List the class files a run would process (dry run)."""
    from enhancekit.cli.commands import sources as mod

    mod.command(
        config_path=config_path,
        classes_dir=classes_dir,
        includes=include,
        excludes=exclude,
        verbose=verbose,
    )


@app.command("plugins")
def plugins() -> None:
    """List available transformer plugins."""
    from enhancekit.cli.commands import plugins as mod

    mod.command()


def main() -> None:
    app()


if __name__ == "__main__":
    main()

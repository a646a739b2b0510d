# enhancekit/cli/ui.py
"""
Shared UI helpers for CLI commands.

Usage:
    from enhancekit.cli.ui import ui, console

    ui.header("enhancekit run")
    ui.success("Done!")
    ui.summary_table(summary)
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from enhancekit.pipeline.outcomes import RunSummary

console = Console()
err_console = Console(stderr=True)


class UI:
    """Unified UI helpers built on Rich."""

    def print(self, msg: str, style: str = "") -> None:
        """Print with optional Rich styling."""
        if style:
            console.print(f"[{style}]{msg}[/{style}]")
        else:
            console.print(msg)

    def header(self, title: str, subtitle: str = "") -> None:
        """Print a fitted box around a command title."""
        if subtitle:
            content = f"[bold]{title}[/bold]\n[dim]{subtitle}[/dim]"
        else:
            content = f"[bold]{title}[/bold]"
        console.print(Panel.fit(content, border_style="blue"))

    def success(self, msg: str) -> None:
        console.print(f"[green]✓[/green] {msg}")

    def error(self, msg: str) -> None:
        console.print(f"[red]✗[/red] {msg}")

    def warning(self, msg: str, detail: str = "") -> None:
        detail_str = f" [dim]({detail})[/dim]" if detail else ""
        console.print(f"[yellow]⚠[/yellow] {msg}{detail_str}")

    def info(self, msg: str) -> None:
        console.print(f"[dim]{msg}[/dim]")

    def summary_table(self, summary: RunSummary) -> None:
        """Render the per-outcome counts of a run."""
        table = Table(title="Enhancement summary")
        table.add_column("Outcome", style="cyan")
        table.add_column("Artifacts", justify="right")

        table.add_row("selected", str(summary.selected))
        table.add_row("skipped (not a class file)", str(summary.skipped))
        table.add_row("discovered", str(summary.discovered))
        table.add_row("rewritten", str(summary.rewritten), style="green")
        table.add_row("no change", str(summary.unchanged))
        failed_style = "red" if summary.errors else ""
        table.add_row("failed", str(summary.errors), style=failed_style)

        console.print(table)
        console.print(f"[dim]Finished in {summary.duration_seconds:.2f}s[/dim]")


ui = UI()

__all__ = ["UI", "ui", "console", "err_console"]

# enhancekit/cli/commands/__init__.py
"""CLI command implementations, imported lazily by enhancekit.cli.cli."""

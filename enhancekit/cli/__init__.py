# enhancekit/cli/__init__.py
"""
enhancekit CLI.

Usage:
    enhancekit run --config enhance.yaml
    enhancekit sources --classes-dir target/classes
    enhancekit plugins
"""

from enhancekit.cli.cli import app

__all__ = ["app"]

# enhancekit/selection/__init__.py
"""
File selection: selection rules -> matcher -> source set.

Usage:
    from enhancekit.selection import assemble, default_rules

    source_set = assemble(default_rules("target/classes"), "target/classes")
    for path in source_set:
        print(path)
"""

from enhancekit.selection.assembler import SourceSet, assemble, default_rules
from enhancekit.selection.matcher import (
    DEFAULT_EXCLUDES,
    GlobPattern,
    MatchResult,
    match_rule,
    resolve,
)

__all__ = [
    "SourceSet",
    "assemble",
    "default_rules",
    "DEFAULT_EXCLUDES",
    "GlobPattern",
    "MatchResult",
    "match_rule",
    "resolve",
]

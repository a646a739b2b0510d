# enhancekit/selection/matcher.py
"""
Resolve one SelectionRule into concrete artifact files.

Patterns are hierarchical globs over the '/'-separated path relative to the
rule's base directory:
- `**` matches zero or more whole path segments
- `*` matches any run of characters inside one segment
- `?` matches exactly one character inside one segment
- a pattern ending in '/' matches everything below that directory

A file is a candidate when it matches at least one include (no includes
means everything) and no exclude. Candidates without the artifact suffix are
dropped. The directory walk is sorted and depth-first, so results are
deterministic.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Iterator, List, Sequence, Tuple

from enhancekit.config.schema import SelectionRule
from enhancekit.core.artifacts import ARTIFACT_SUFFIX, is_artifact
from enhancekit.core.exceptions import SelectionError
from enhancekit.logging.logger import get_logger
from enhancekit.logging.tags import SELECTION

logger = get_logger(__name__)


# SCM and editor files skipped unless a rule turns default excludes off
DEFAULT_EXCLUDES: Tuple[str, ...] = (
    "**/*~",
    "**/#*#",
    "**/.#*",
    "**/%*%",
    "**/._*",
    "**/CVS/**",
    "**/.cvsignore",
    "**/RCS/**",
    "**/SCCS/**",
    "**/.svn/**",
    "**/.bzr/**",
    "**/.hg/**",
    "**/.git/**",
    "**/.gitignore",
    "**/.gitattributes",
    "**/.DS_Store",
)


# =============================================================================
# Glob Patterns
# =============================================================================


class GlobPattern:
    """A compiled hierarchical glob."""

    def __init__(self, pattern: str) -> None:
        normalized = pattern.replace("\\", "/")
        if normalized.endswith("/"):
            normalized += "**"
        self.pattern = normalized
        self._segments = self._compile(normalized)

    @staticmethod
    def _compile(pattern: str) -> Tuple[object, ...]:
        segments: List[object] = []
        for part in pattern.split("/"):
            if part == "":
                continue
            if part == "**":
                # consecutive ** collapse into one
                if segments and segments[-1] == "**":
                    continue
                segments.append("**")
                continue
            regex = "".join(
                "[^/]*" if ch == "*" else "[^/]" if ch == "?" else re.escape(ch) for ch in part
            )
            segments.append(re.compile(f"{regex}\\Z"))
        return tuple(segments)

    def matches(self, relative_path: str) -> bool:
        """Match a '/'-separated relative path."""
        parts = tuple(p for p in relative_path.split("/") if p)
        return self._match(0, parts)

    def _match(self, index: int, parts: Tuple[str, ...]) -> bool:
        if index == len(self._segments):
            return not parts

        segment = self._segments[index]
        if segment == "**":
            return any(self._match(index + 1, parts[i:]) for i in range(len(parts) + 1))

        if not parts:
            return False
        return segment.match(parts[0]) is not None and self._match(index + 1, parts[1:])

    def __repr__(self) -> str:
        return f"GlobPattern({self.pattern!r})"


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> GlobPattern:
    return GlobPattern(pattern)


def matches_any(relative_path: str, patterns: Sequence[str]) -> bool:
    return any(compile_pattern(p).matches(relative_path) for p in patterns)


# =============================================================================
# Matching
# =============================================================================


@dataclass
class MatchResult:
    """Files selected by one rule, plus candidates dropped for their suffix."""

    base_directory: Path
    files: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)


def base_directory_for(rule: SelectionRule, artifact_root: str | Path) -> Path:
    """The directory a rule's patterns are evaluated against."""
    base = rule.directory if rule.directory is not None else Path(artifact_root)
    return Path(base).absolute()


def is_candidate(relative_path: str, rule: SelectionRule) -> bool:
    """Include/exclude decision for one relative path; excludes always win."""
    if rule.includes and not matches_any(relative_path, rule.includes):
        return False
    if matches_any(relative_path, rule.excludes):
        return False
    if rule.use_default_excludes and matches_any(relative_path, DEFAULT_EXCLUDES):
        return False
    return True


def _walk(base: Path) -> Iterator[str]:
    """Yield '/'-separated relative paths of regular files, sorted, depth first."""
    visited: set[str] = set()

    def visit(directory: Path, prefix: str) -> Iterator[str]:
        real = os.path.realpath(directory)
        if real in visited:
            return
        visited.add(real)

        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)

        for entry in entries:
            relative = f"{prefix}{entry.name}"
            if entry.is_dir():
                yield from visit(Path(entry.path), f"{relative}/")
            elif entry.is_file():
                yield relative

    yield from visit(base, "")


def match_rule(rule: SelectionRule, artifact_root: str | Path) -> MatchResult:
    """
    Evaluate one rule against the filesystem.

    Raises:
        SelectionError: If the base directory is missing, not a directory,
            or cannot be traversed.
    """
    logger.debug(f"{SELECTION} Processing FileSet")
    base = base_directory_for(rule, artifact_root)
    logger.debug(f"{SELECTION} Using base directory: {base}")

    if not base.exists():
        raise SelectionError("Base directory does not exist", directory=base)
    if not base.is_dir():
        raise SelectionError("Base directory is not a directory", directory=base)

    result = MatchResult(base_directory=base)
    try:
        for relative in _walk(base):
            if not is_candidate(relative, rule):
                continue

            candidate = base / relative
            if is_artifact(relative):
                result.files.append(candidate)
                logger.info(f"{SELECTION} Added file to source set: {candidate}")
            else:
                result.skipped.append(candidate)
                logger.debug(f"{SELECTION} Skipping non '{ARTIFACT_SUFFIX}' file: {candidate}")
    except OSError as e:
        raise SelectionError(f"Unable to traverse: {e}", directory=base) from e

    logger.debug(f"{SELECTION} FileSet was processed successfully")
    return result


def resolve(rule: SelectionRule, artifact_root: str | Path) -> List[Path]:
    """Absolute artifact files selected by one rule, in walk order."""
    return match_rule(rule, artifact_root).files


__all__ = [
    "DEFAULT_EXCLUDES",
    "GlobPattern",
    "compile_pattern",
    "matches_any",
    "MatchResult",
    "base_directory_for",
    "is_candidate",
    "match_rule",
    "resolve",
]

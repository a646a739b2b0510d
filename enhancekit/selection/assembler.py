# enhancekit/selection/assembler.py
"""
Assemble the source set from all selection rules.

Rules are applied in order. Each rule's matches are appended to one running
sequence, skipping files already present, so overlapping rules never select
the same artifact twice.

Assembly is all-or-nothing: the first rule that cannot be traversed aborts
with a SelectionError naming the rule. Nothing has been rewritten at this
point, and enhancing an incomplete set silently would be worse than failing.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Sequence, Tuple

from enhancekit.config.schema import SelectionRule
from enhancekit.core.exceptions import SelectionError
from enhancekit.logging.logger import get_logger
from enhancekit.logging.tags import SELECTION
from enhancekit.selection.matcher import match_rule

logger = get_logger(__name__)


@dataclass(frozen=True)
class SourceSet:
    """
    Ordered, duplicate-free artifact files selected for one run.

    Order is rule order, then walk order within a rule.
    """

    root: Path
    files: Tuple[Path, ...] = ()
    skipped: Tuple[Path, ...] = field(default=(), compare=False)

    def __iter__(self) -> Iterator[Path]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        return Path(path).absolute() in self.files


def default_rules(artifact_root: str | Path) -> List[SelectionRule]:
    """The single rule used when none is configured: the whole artifact root."""
    rule = SelectionRule(directory=Path(artifact_root).absolute())
    logger.debug(f"{SELECTION} Added a default FileSet with base directory: {rule.directory}")
    return [rule]


def _dedup_key(path: Path) -> str:
    return os.path.normcase(os.path.realpath(path))


def assemble(rules: Sequence[SelectionRule], artifact_root: str | Path) -> SourceSet:
    """
    Build the source set.

    Args:
        rules: Selection rules, applied in order.
        artifact_root: Root directory of compiled artifacts; base directory
            of rules without one.

    Raises:
        SelectionError: From the first rule that cannot be traversed,
            annotated with that rule's index.
    """
    logger.debug(f"{SELECTION} Starting assembly of the source set")
    root = Path(artifact_root).absolute()

    files: List[Path] = []
    skipped: List[Path] = []
    seen: set[str] = set()

    for index, rule in enumerate(rules):
        try:
            result = match_rule(rule, root)
        except SelectionError as e:
            raise SelectionError(
                e.reason, directory=e.directory, rule_index=index
            ) from e

        for path in result.files:
            key = _dedup_key(path)
            if key in seen:
                logger.debug(f"{SELECTION} Already in source set: {path}")
                continue
            seen.add(key)
            files.append(path)
        skipped.extend(result.skipped)

    logger.debug(f"{SELECTION} Ending the assembly of the source set ({len(files)} files)")
    return SourceSet(root=root, files=tuple(files), skipped=tuple(skipped))


__all__ = ["SourceSet", "default_rules", "assemble"]

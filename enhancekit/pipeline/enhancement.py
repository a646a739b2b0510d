# enhancekit/pipeline/enhancement.py
"""
Enhancement phase: ask the transformer to rewrite every artifact.

Per artifact, in source-set order:
1. capture the current timestamps
2. read the bytes and call transformer.enhance(identity, data)
3. None -> no change, nothing is written
   bytes -> clear-then-write via rewrite_artifact()
4. restore the captured timestamps, whatever happened

Recoverable failures (I/O, TransformationError) are logged and the phase
continues. Any other transformer exception, or a result that is neither
bytes nor None, means the transformer itself is broken: the phase stops and
raises UnexpectedTransformError. A wrong-typed result is rejected before the
file is cleared.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from enhancekit.core.artifacts import determine_identity
from enhancekit.core.context import EnhancementContext
from enhancekit.core.exceptions import TransformationError, UnexpectedTransformError
from enhancekit.logging.logger import get_logger
from enhancekit.logging.tags import ENHANCE
from enhancekit.pipeline.outcomes import ArtifactOutcome, ArtifactResult, RunSummary
from enhancekit.pipeline.rewrite import rewrite_artifact
from enhancekit.selection.assembler import SourceSet
from enhancekit.transform.base import Transformer

logger = get_logger(__name__)


def restore_timestamp(path: Path, stat: os.stat_result) -> bool:
    """
    Put back the access and modification times captured before the rewrite.

    Best effort: a failure is logged and reported, never raised.
    """
    try:
        os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns))
    except OSError as e:
        logger.debug(f"{ENHANCE} Setting lastModified failed for class file: {path} ({e})")
        return False
    return True


def _transform(path: Path, root: Path, transformer: Transformer) -> ArtifactResult:
    try:
        identity = determine_identity(root, path)
    except ValueError as e:
        logger.error(f"{ENHANCE} Class file is outside the classes directory: {path} ({e})")
        return ArtifactResult(path, ArtifactOutcome.FAILED, None, e)

    try:
        new_bytes = transformer.enhance(identity, path.read_bytes())
        if new_bytes is None:
            logger.info(f"{ENHANCE} Skipping file: {path}")
            return ArtifactResult(path, ArtifactOutcome.UNCHANGED, identity)

        if not isinstance(new_bytes, (bytes, bytearray)):
            raise TypeError(
                f"enhance() must return bytes or None, got {type(new_bytes).__name__}"
            )
        state = rewrite_artifact(path, bytes(new_bytes))
    except (OSError, TransformationError) as e:
        logger.error(f"{ENHANCE} An exception occurred while trying to enhance class file: {path} ({e})")
        return ArtifactResult(path, ArtifactOutcome.FAILED, identity, e)
    except Exception as e:
        logger.error(f"{ENHANCE} Transformer failed unexpectedly on class file: {path} ({e})")
        return ArtifactResult(path, ArtifactOutcome.FATAL, identity, e)

    if not state.succeeded:
        logger.error(f"{ENHANCE} Failed to rewrite class file: {path} ({state.value})")
        return ArtifactResult(path, ArtifactOutcome.FAILED, identity)

    logger.info(f"{ENHANCE} Successfully enhanced class file: {path}")
    return ArtifactResult(path, ArtifactOutcome.REWRITTEN, identity)


def enhance_artifact(path: Path, root: Path, transformer: Transformer) -> ArtifactResult:
    """Enhance one artifact; its timestamps are restored however the attempt ends."""
    logger.debug(f"{ENHANCE} Trying to enhance class file: {path}")
    try:
        before = os.stat(path)
    except OSError as e:
        logger.error(f"{ENHANCE} Unable to read class file: {path} ({e})")
        return ArtifactResult(path, ArtifactOutcome.FAILED, None, e)

    try:
        return _transform(path, root, transformer)
    finally:
        restore_timestamp(path, before)


def enhance(
    source_set: SourceSet,
    context: EnhancementContext,
    transformer: Transformer,
    summary: Optional[RunSummary] = None,
) -> List[ArtifactResult]:
    """
    Run enhancement for every artifact, in source-set order.

    Returns:
        One result per artifact.

    Raises:
        UnexpectedTransformError: If the transformer fails outside its
            recoverable error class. Remaining artifacts are not processed.
    """
    logger.debug(f"{ENHANCE} Starting class enhancement")
    root = context.scope.root

    results: List[ArtifactResult] = []
    for path in source_set:
        result = enhance_artifact(path, root, transformer)
        results.append(result)
        if summary is not None:
            summary.record_enhancement(result)

        if result.outcome is ArtifactOutcome.FATAL:
            identity = result.identity or str(path)
            raise UnexpectedTransformError(identity, result.error) from result.error

    logger.debug(f"{ENHANCE} Ending class enhancement")
    return results


__all__ = ["restore_timestamp", "enhance_artifact", "enhance"]

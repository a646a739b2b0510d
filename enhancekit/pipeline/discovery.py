# enhancekit/pipeline/discovery.py
"""
Discovery phase: register every artifact's types with the transformer.

Runs over the whole source set before any artifact is enhanced, because
enhancing one artifact may need type information from any other.

Every failure here is isolated to its artifact. A broken transformer will
fail again during enhancement, where unexpected errors abort the run.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from enhancekit.core.artifacts import determine_identity
from enhancekit.core.context import EnhancementContext
from enhancekit.core.exceptions import TransformationError
from enhancekit.logging.logger import get_logger
from enhancekit.logging.tags import DISCOVERY
from enhancekit.pipeline.outcomes import ArtifactOutcome, ArtifactResult, RunSummary
from enhancekit.selection.assembler import SourceSet
from enhancekit.transform.base import Transformer

logger = get_logger(__name__)


def discover_artifact(path: Path, root: Path, transformer: Transformer) -> ArtifactResult:
    """Submit one artifact to the transformer's discovery capability."""
    logger.debug(f"{DISCOVERY} Trying to discover types for classes in file: {path}")
    identity: Optional[str] = None
    try:
        identity = determine_identity(root, path)
        transformer.discover_types(identity, path.read_bytes())
    except (OSError, ValueError, TransformationError) as e:
        logger.error(f"{DISCOVERY} Unable to discover types for classes in file: {path} ({e})")
        return ArtifactResult(path, ArtifactOutcome.FAILED, identity, e)
    except Exception as e:
        logger.exception(
            f"{DISCOVERY} Unexpected error discovering types for classes in file: {path}"
        )
        return ArtifactResult(path, ArtifactOutcome.FAILED, identity, e)

    logger.info(f"{DISCOVERY} Successfully discovered types for classes in file: {path}")
    return ArtifactResult(path, ArtifactOutcome.DISCOVERED, identity)


def discover(
    source_set: SourceSet,
    context: EnhancementContext,
    transformer: Transformer,
    summary: Optional[RunSummary] = None,
) -> List[ArtifactResult]:
    """
    Run discovery for every artifact, in source-set order.

    Returns:
        One result per artifact.
    """
    logger.debug(f"{DISCOVERY} Starting type discovery")
    root = context.scope.root

    results: List[ArtifactResult] = []
    for path in source_set:
        result = discover_artifact(path, root, transformer)
        results.append(result)
        if summary is not None:
            summary.record_discovery(result)

    logger.debug(f"{DISCOVERY} Ending type discovery")
    return results


__all__ = ["discover_artifact", "discover"]

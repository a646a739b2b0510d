# enhancekit/core/__init__.py
"""
Core contracts: artifact naming, resolution context, errors, plugin registry.
"""

from enhancekit.core.artifacts import (
    ARTIFACT_SUFFIX,
    determine_identity,
    identity_to_resource,
    is_artifact,
)
from enhancekit.core.context import (
    ArtifactScope,
    EnhancementContext,
    EnhancementFlags,
    build_context,
)
from enhancekit.core.exceptions import (
    ArtifactNotFoundError,
    ContextBuildError,
    EnhanceError,
    SelectionError,
    TransformationError,
    UnexpectedTransformError,
)

__all__ = [
    "ARTIFACT_SUFFIX",
    "determine_identity",
    "identity_to_resource",
    "is_artifact",
    "ArtifactScope",
    "EnhancementContext",
    "EnhancementFlags",
    "build_context",
    "ArtifactNotFoundError",
    "ContextBuildError",
    "EnhanceError",
    "SelectionError",
    "TransformationError",
    "UnexpectedTransformError",
]

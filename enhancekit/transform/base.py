# enhancekit/transform/base.py
"""
Transformer protocol.

A transformer is the opaque engine that understands compiled artifacts. The
runner drives it in two passes over the same source set:

1. discover_types(identity, data) for every artifact
2. enhance(identity, data) for every artifact

The first pass fills the transformer's internal type registry; the second
may consult it for any artifact. Transformers raise TransformationError for
content they cannot handle; anything else is treated as the transformer
itself being broken and aborts the run.

Contract:
- plugin_name: registry name
- __init__(context, **kwargs): built once per run from the EnhancementContext
- resource_scope(): optional classmethod returning the ArtifactScope of the
  transformer's own resources, layered beneath the artifact directory
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Transformer(Protocol):
    """Protocol for artifact transformers."""

    plugin_name: str

    def discover_types(self, identity: str, data: bytes) -> None:
        """Register the types declared by one artifact."""
        ...

    def enhance(self, identity: str, data: bytes) -> Optional[bytes]:
        """
        Rewrite one artifact.

        Returns:
            Replacement bytes, or None when the artifact needs no change.
        """
        ...


__all__ = ["Transformer"]

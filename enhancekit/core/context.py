# enhancekit/core/context.py
"""
Resolution context handed to transformers.

The context owns:
- an ArtifactScope rooted at the artifact directory, layered on top of the
  transformer's own scope, so cross-references between artifacts resolve
  during discovery and enhancement
- the four run-wide capability flags

The flags are global for the run. Every accessor takes the identity being
asked about and ignores it; per-artifact policy belongs to the transformer.

Usage:
    context = build_context("target/classes", EnhancementFlags(dirty_tracking=True))
    context.scope.load_artifact("org.foo.Bar")
    context.do_dirty_checking_inline("org.foo.Bar")  # True
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Optional

from enhancekit.core.artifacts import identity_to_resource
from enhancekit.core.exceptions import ArtifactNotFoundError, ContextBuildError
from enhancekit.logging.logger import get_logger
from enhancekit.logging.tags import CONTEXT

logger = get_logger(__name__)


@dataclass(frozen=True)
class EnhancementFlags:
    """Run-wide capability flags, passed to the transformer uninterpreted."""

    association_management: bool = False
    dirty_tracking: bool = False
    lazy_initialization: bool = False
    extended_enhancement: bool = False


class ArtifactScope:
    """
    Read-only lookup scope over one directory.

    Lookups delegate to the parent scope first, then fall back to this
    scope's own root, so the transformer's own resources always win.
    """

    def __init__(self, root: str | Path, parent: Optional["ArtifactScope"] = None) -> None:
        self._root = Path(root).absolute()
        self._parent = parent

    @property
    def root(self) -> Path:
        return self._root

    @property
    def parent(self) -> Optional["ArtifactScope"]:
        return self._parent

    def get_resource(self, name: str) -> Optional[Path]:
        """
        Resolve a '/'-separated resource name to a file.

        Returns:
            Absolute path of the resource, or None if no scope has it.
        """
        if self._parent is not None:
            found = self._parent.get_resource(name)
            if found is not None:
                return found
        return self._find_local(name)

    def find_artifact(self, identity: str) -> Optional[Path]:
        """Resolve a dotted artifact identity to its file, or None."""
        return self.get_resource(identity_to_resource(identity))

    def load_artifact(self, identity: str) -> bytes:
        """
        Read the bytes of an artifact by identity.

        Raises:
            ArtifactNotFoundError: If no scope contains the artifact.
        """
        path = self.find_artifact(identity)
        if path is None:
            raise ArtifactNotFoundError(f"Artifact not found: {identity}")
        return path.read_bytes()

    def _find_local(self, name: str) -> Optional[Path]:
        relative = PurePosixPath(name)
        if relative.is_absolute() or ".." in relative.parts:
            return None
        candidate = self._root.joinpath(*relative.parts)
        if candidate.is_file():
            return candidate
        return None

    def __repr__(self) -> str:
        return f"ArtifactScope(root={str(self._root)!r}, parent={self._parent!r})"


class EnhancementContext:
    """
    Context queried by the transformer during discovery and enhancement.

    Constructed once per run via build_context().
    """

    def __init__(self, scope: ArtifactScope, flags: EnhancementFlags) -> None:
        self._scope = scope
        self._flags = flags

    @property
    def scope(self) -> ArtifactScope:
        return self._scope

    @property
    def flags(self) -> EnhancementFlags:
        return self._flags

    def do_bidirectional_association_management(self, identity: Optional[str]) -> bool:
        return self._flags.association_management

    def do_dirty_checking_inline(self, identity: Optional[str]) -> bool:
        return self._flags.dirty_tracking

    def has_lazy_loadable_attributes(self, identity: Optional[str]) -> bool:
        return self._flags.lazy_initialization

    def is_lazy_loadable(self, identity: Optional[str]) -> bool:
        return self._flags.lazy_initialization

    def do_extended_enhancement(self, identity: Optional[str]) -> bool:
        return self._flags.extended_enhancement


def build_context(
    artifact_root: str | Path,
    flags: EnhancementFlags,
    parent: Optional[ArtifactScope] = None,
) -> EnhancementContext:
    """
    Build the enhancement context for a run.

    Args:
        artifact_root: Directory holding the compiled artifacts.
        flags: Run-wide capability flags.
        parent: Scope of the transformer library, consulted first.

    Raises:
        ContextBuildError: If artifact_root is not an existing directory.
    """
    logger.debug(f"{CONTEXT} Creating enhancement context for folder: {artifact_root}")
    try:
        root = Path(artifact_root).absolute()
    except (TypeError, ValueError) as e:
        raise ContextBuildError(f"Malformed artifact root {artifact_root!r}: {e}") from e

    if not root.exists():
        raise ContextBuildError(f"Artifact root does not exist: {root}")
    if not root.is_dir():
        raise ContextBuildError(f"Artifact root is not a directory: {root}")

    return EnhancementContext(ArtifactScope(root, parent=parent), flags)


__all__ = [
    "EnhancementFlags",
    "ArtifactScope",
    "EnhancementContext",
    "build_context",
]

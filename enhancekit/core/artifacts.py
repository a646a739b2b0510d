# enhancekit/core/artifacts.py
"""
Artifact naming helpers.

An artifact is one compiled class file under the artifact root. Its identity
is the dotted name derived from the path relative to that root:

    classes/org/foo/Bar.class  ->  org.foo.Bar
"""

from __future__ import annotations

from pathlib import Path

from enhancekit.logging.logger import get_logger

logger = get_logger(__name__)

ARTIFACT_SUFFIX = ".class"


def is_artifact(path: str | Path) -> bool:
    """True if the file name carries the recognized artifact suffix."""
    return str(path).endswith(ARTIFACT_SUFFIX)


def determine_identity(root: str | Path, path: str | Path) -> str:
    """
    Derive the dotted artifact identity of a file.

    Args:
        root: Artifact root directory.
        path: Artifact file somewhere below root.

    Returns:
        Relative path with the suffix stripped and separators mapped to dots.

    Raises:
        ValueError: If path is not located below root.
    """
    logger.debug(f"Determining class name for file: {path}")
    relative = Path(path).absolute().relative_to(Path(root).absolute())
    name = relative.as_posix()
    if name.endswith(ARTIFACT_SUFFIX):
        name = name[: -len(ARTIFACT_SUFFIX)]
    return name.replace("/", ".")


def identity_to_resource(identity: str) -> str:
    """Map an identity back to its '/'-separated resource name."""
    return identity.replace(".", "/") + ARTIFACT_SUFFIX


__all__ = [
    "ARTIFACT_SUFFIX",
    "is_artifact",
    "determine_identity",
    "identity_to_resource",
]

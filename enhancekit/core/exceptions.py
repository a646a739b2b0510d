# enhancekit/core/exceptions.py
"""
Exception hierarchy for enhancekit.

Fatal errors (abort the run before or during processing):
- SelectionError: a selection rule's base directory is missing or unreadable
- ContextBuildError: the resolution context cannot be constructed
- UnexpectedTransformError: the transformer failed outside its recoverable class

Recoverable, per-artifact errors (logged, the run continues):
- TransformationError: raised by transformers for content they cannot handle
- OSError: read, clear, or write failures on a single artifact
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class EnhanceError(Exception):
    """Base error for enhancekit."""

    pass


class SelectionError(EnhanceError):
    """Raised when a selection rule cannot be resolved against the filesystem."""

    def __init__(
        self,
        message: str,
        directory: Optional[Path] = None,
        rule_index: Optional[int] = None,
    ):
        self.reason = message
        self.directory = directory
        self.rule_index = rule_index
        if rule_index is not None:
            message = f"File set #{rule_index}: {message}"
        if directory is not None:
            message = f"{message} (directory: {directory})"
        super().__init__(message)


class ContextBuildError(EnhanceError):
    """Raised when the enhancement context cannot be built."""

    pass


class ArtifactNotFoundError(EnhanceError):
    """Raised when an artifact identity cannot be resolved in a scope."""

    pass


class TransformationError(EnhanceError):
    """
    Recoverable transformer failure for a single artifact.

    Transformers raise this for malformed or unsupported content. The run
    logs it and moves on to the next artifact.
    """

    def __init__(self, message: str, identity: Optional[str] = None):
        self.identity = identity
        super().__init__(message)


class UnexpectedTransformError(EnhanceError):
    """Raised when the transformer fails outside the recoverable class."""

    def __init__(self, identity: str, cause: BaseException):
        self.identity = identity
        super().__init__(
            f"Transformer failed unexpectedly on {identity}: "
            f"{type(cause).__name__}: {cause}"
        )


__all__ = [
    "EnhanceError",
    "SelectionError",
    "ContextBuildError",
    "ArtifactNotFoundError",
    "TransformationError",
    "UnexpectedTransformError",
]

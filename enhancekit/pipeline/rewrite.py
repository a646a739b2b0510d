# enhancekit/pipeline/rewrite.py
"""
Clear-then-write persistence of a rewritten artifact.

    CLEAR   delete the file, then recreate it empty at the same path
    WRITE   write the full replacement bytes into the empty file

Clearing first guarantees no stale trailing bytes survive when the new
content is shorter than the old.

There is no backup of the original bytes. If the delete succeeds and the
recreate or the write fails, the artifact is left missing or truncated; the
failure is logged and the run moves on.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from enhancekit.logging.logger import get_logger
from enhancekit.logging.tags import REWRITE

logger = get_logger(__name__)


class RewriteState(str, Enum):
    """Terminal state of one rewrite."""

    REWRITTEN = "rewritten"
    FAILED_CLEAR = "failed_clear"
    FAILED_WRITE = "failed_write"

    @property
    def succeeded(self) -> bool:
        return self is RewriteState.REWRITTEN


def clear_file(path: Path) -> bool:
    """
    Delete a file and recreate it empty.

    Returns:
        True if the file now exists and is empty.
    """
    logger.debug(f"{REWRITE} Trying to clear the contents of file: {path}")

    try:
        path.unlink()
    except OSError as e:
        logger.error(f"{REWRITE} Unable to delete file: {path} ({e})")
        return False

    try:
        path.touch(exist_ok=False)
    except FileExistsError:
        logger.error(f"{REWRITE} Unable to create file: {path}")
        return False
    except OSError as e:
        logger.warning(f"{REWRITE} Problem clearing file for writing out enhancements [ {path} ]: {e}")
        return False

    logger.info(f"{REWRITE} Successfully cleared the contents of file: {path}")
    return True


def rewrite_artifact(target: str | Path, data: bytes) -> RewriteState:
    """
    Replace an artifact's contents with new bytes.

    Args:
        target: Artifact file to rewrite.
        data: Complete replacement contents.

    Returns:
        REWRITTEN on success, FAILED_CLEAR if the file could not be cleared,
        FAILED_WRITE if the bytes could not be written.
    """
    path = Path(target)
    logger.debug(f"{REWRITE} Writing byte code to file: {path}")

    if not clear_file(path):
        return RewriteState.FAILED_CLEAR

    try:
        with path.open("wb") as fh:
            fh.write(data)
    except OSError as e:
        logger.error(f"{REWRITE} Error writing bytes to file: {path} ({e})")
        return RewriteState.FAILED_WRITE

    logger.debug(f"{REWRITE} {len(data)} bytes were successfully written to file: {path}")
    return RewriteState.REWRITTEN


__all__ = ["RewriteState", "clear_file", "rewrite_artifact"]

# enhancekit/pipeline/__init__.py
"""
The enhancement pipeline.

Key components:
- discovery: register every artifact with the transformer
- enhancement: rewrite every artifact, restoring timestamps
- rewrite: clear-then-write persistence
- runner: orchestrates a full run
"""

from enhancekit.pipeline.discovery import discover, discover_artifact
from enhancekit.pipeline.enhancement import enhance, enhance_artifact, restore_timestamp
from enhancekit.pipeline.outcomes import ArtifactOutcome, ArtifactResult, RunSummary
from enhancekit.pipeline.rewrite import RewriteState, clear_file, rewrite_artifact
from enhancekit.pipeline.runner import EnhanceRunner, list_source_set, run_enhance

__all__ = [
    "discover",
    "discover_artifact",
    "enhance",
    "enhance_artifact",
    "restore_timestamp",
    "ArtifactOutcome",
    "ArtifactResult",
    "RunSummary",
    "RewriteState",
    "clear_file",
    "rewrite_artifact",
    "EnhanceRunner",
    "list_source_set",
    "run_enhance",
]

# enhancekit/transform/plugins/passthrough.py
"""
Passthrough transformer.

Discovers nothing and never changes an artifact. Useful to verify file-set
selection and the run wiring without touching any class file.
"""

from __future__ import annotations

from typing import Any, Optional

from enhancekit.core.context import EnhancementContext
from enhancekit.logging.logger import get_logger

logger = get_logger(__name__)


class PassthroughTransformer:
    plugin_name = "passthrough"

    def __init__(self, context: EnhancementContext, **_: Any) -> None:
        self._context = context
        self._seen: set[str] = set()

    @classmethod
    def resource_scope(cls):
        return None

    def discover_types(self, identity: str, data: bytes) -> None:
        self._seen.add(identity)

    def enhance(self, identity: str, data: bytes) -> Optional[bytes]:
        if identity not in self._seen:
            logger.debug(f"Enhancing {identity} without prior discovery")
        return None

# tests/unit/helpers.py
"""
Test helpers: file writing and a transformer double with scripted results.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Union

from enhancekit.core.context import EnhancementContext

Script = Union[bytes, None, BaseException]


class ScriptedTransformer:
    """
    enhance_script maps an identity to a list of per-call results; each
    entry is returned (bytes or None) or raised (an exception instance).
    Identities without a remaining script entry return None.
    """

    plugin_name = "scripted"

    def __init__(
        self,
        context: Optional[EnhancementContext] = None,
        enhance_script: Optional[Dict[str, List[Script]]] = None,
        discover_errors: Optional[Dict[str, BaseException]] = None,
    ) -> None:
        self.context = context
        self.enhance_script = {k: list(v) for k, v in (enhance_script or {}).items()}
        self.discover_errors = dict(discover_errors or {})
        self.discovered: List[str] = []
        self.enhanced: List[str] = []

    def discover_types(self, identity: str, data: bytes) -> None:
        if identity in self.discover_errors:
            raise self.discover_errors[identity]
        self.discovered.append(identity)

    def enhance(self, identity: str, data: bytes) -> Optional[bytes]:
        self.enhanced.append(identity)
        script = self.enhance_script.get(identity)
        if not script:
            return None
        result = script.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result


def write_file(path: Path, data: bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path

# enhancekit/transform/__init__.py
"""
Transformer plugins and the factory that builds one for a run.

Usage:
    from enhancekit.transform import build_transformer, transformer_scope

    parent = transformer_scope("passthrough")
    context = build_context(root, flags, parent=parent)
    transformer = build_transformer("passthrough", context)
"""

from __future__ import annotations

from typing import Any, Optional

from enhancekit.core.context import ArtifactScope, EnhancementContext
from enhancekit.core.registry import get_transformer_plugin
from enhancekit.logging.logger import get_logger
from enhancekit.logging.tags import CONTEXT
from enhancekit.transform.base import Transformer

logger = get_logger(__name__)


def transformer_scope(plugin_name: str) -> Optional[ArtifactScope]:
    """Return the transformer's own resource scope, if its plugin declares one."""
    plugin_cls = get_transformer_plugin(plugin_name)
    scope_factory = getattr(plugin_cls, "resource_scope", None)
    if scope_factory is None:
        return None
    return scope_factory()


def build_transformer(
    plugin_name: str,
    context: EnhancementContext,
    **kwargs: Any,
) -> Transformer:
    """
    Instantiate a transformer plugin bound to the run's context.

    Raises:
        PluginNotFoundError: If no plugin with that name is registered.
    """
    logger.debug(f"{CONTEXT} Creating transformer {plugin_name!r}")
    plugin_cls = get_transformer_plugin(plugin_name)
    return plugin_cls(context=context, **kwargs)


__all__ = ["Transformer", "build_transformer", "transformer_scope"]

# enhancekit/core/registry.py
"""
Transformer plugin registry.

A transformer plugin is a class with a non-empty `plugin_name` and callable
`discover_types` and `enhance` methods. Classes missing any of these are
rejected when registered, so a run never starts with a transformer that
cannot take part in both phases.

Built-in plugins live in enhancekit.transform.plugins and are loaded on the
first lookup. Third-party transformers are added with register().

Design principle: NO SILENT FALLBACK
- If the config names "acme", the run gets acme or an error
- No substitution of a different transformer
"""

from __future__ import annotations

import importlib
import pkgutil
from typing import Any, Dict, List, Optional, Tuple, Type

from enhancekit.logging.logger import get_logger

logger = get_logger(__name__)

BUILTIN_PACKAGE = "enhancekit.transform.plugins"

REQUIRED_METHODS: Tuple[str, ...] = ("discover_types", "enhance")


# =============================================================================
# Exceptions
# =============================================================================


class PluginRegistryError(Exception):
    """Base error for plugin registry operations."""

    pass


class PluginNotFoundError(PluginRegistryError):
    """Raised when no transformer is registered under the requested name."""

    pass


class DuplicatePluginError(PluginRegistryError):
    """Raised when two transformer classes claim the same name."""

    pass


# =============================================================================
# Registry
# =============================================================================


def check_transformer_class(plugin_class: Type[Any]) -> str:
    """
    Validate a class against the transformer contract.

    Returns:
        The plugin's name.

    Raises:
        PluginRegistryError: If the name is missing or a phase method is absent.
    """
    name = getattr(plugin_class, "plugin_name", None)
    if not isinstance(name, str) or not name:
        raise PluginRegistryError(
            f"Transformer {plugin_class.__name__} needs a non-empty 'plugin_name'"
        )

    missing = [m for m in REQUIRED_METHODS if not callable(getattr(plugin_class, m, None))]
    if missing:
        raise PluginRegistryError(
            f"Transformer {plugin_class.__name__} ({name!r}) is missing: {', '.join(missing)}"
        )
    return name


class TransformerRegistry:
    """
    Transformer classes by plugin name.

    Args:
        builtin_package: Package whose modules hold the built-in plugins,
            imported on first lookup. None disables built-ins.
    """

    def __init__(self, builtin_package: Optional[str] = BUILTIN_PACKAGE) -> None:
        self._builtin_package = builtin_package
        self._plugins: Dict[str, Type[Any]] = {}
        self._builtins_loaded = builtin_package is None

    def get(self, plugin_name: str) -> Type[Any]:
        self._load_builtins()
        try:
            return self._plugins[plugin_name]
        except KeyError:
            raise PluginNotFoundError(
                f"Unknown transformer plugin: {plugin_name!r}. Available: {self.names()}"
            ) from None

    def names(self) -> List[str]:
        self._load_builtins()
        return sorted(self._plugins)

    def register(self, plugin_class: Type[Any]) -> None:
        """Add a transformer class; registering the same class twice is a no-op."""
        name = check_transformer_class(plugin_class)

        existing = self._plugins.get(name)
        if existing is plugin_class:
            return
        if existing is not None:
            raise DuplicatePluginError(
                f"Transformer name {name!r} is used by both "
                f"{existing.__module__}.{existing.__name__} and "
                f"{plugin_class.__module__}.{plugin_class.__name__}"
            )

        self._plugins[name] = plugin_class
        logger.debug(f"Registered transformer plugin: {name!r}")

    def _load_builtins(self) -> None:
        if self._builtins_loaded:
            return
        self._builtins_loaded = True

        package = importlib.import_module(self._builtin_package)
        for module_info in pkgutil.iter_modules(package.__path__, prefix=f"{package.__name__}."):
            module = importlib.import_module(module_info.name)
            for obj in vars(module).values():
                # only classes defined in the module itself, not its imports
                if isinstance(obj, type) and obj.__module__ == module.__name__ and hasattr(obj, "plugin_name"):
                    self.register(obj)

        logger.debug(f"Loaded built-in transformer plugins: {sorted(self._plugins)}")


TRANSFORMER_REGISTRY = TransformerRegistry()


def get_transformer_plugin(plugin_name: str) -> Type[Any]:
    """Get a transformer plugin class by name."""
    return TRANSFORMER_REGISTRY.get(plugin_name)


def available_transformer_plugins() -> List[str]:
    """List available transformer plugins."""
    return TRANSFORMER_REGISTRY.names()


def register_transformer_plugin(plugin_class: Type[Any]) -> None:
    """Register a third-party transformer plugin class."""
    TRANSFORMER_REGISTRY.register(plugin_class)


__all__ = [
    "PluginRegistryError",
    "PluginNotFoundError",
    "DuplicatePluginError",
    "REQUIRED_METHODS",
    "check_transformer_class",
    "TransformerRegistry",
    "TRANSFORMER_REGISTRY",
    "get_transformer_plugin",
    "available_transformer_plugins",
    "register_transformer_plugin",
]

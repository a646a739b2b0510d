# enhancekit/transform/plugins/__init__.py
"""Built-in transformer plugins, discovered by TRANSFORMER_REGISTRY."""

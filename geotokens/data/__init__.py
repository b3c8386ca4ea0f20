"""
Data layer: abbreviation loaders, cache and registry.
"""

from .registry import DataRegistry
from .cache.cache_memory import InMemoryCache
from .loaders.loader_json import JsonAbbreviationLoader

__all__ = ["DataRegistry", "InMemoryCache", "JsonAbbreviationLoader"]

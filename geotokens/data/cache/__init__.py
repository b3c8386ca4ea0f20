"""
Cache module for the data layer.
"""
from .cache_interface import CacheInterface
from .cache_memory import InMemoryCache

__all__ = ["CacheInterface", "InMemoryCache"]

"""
Loaders module for the data layer.
"""
from .loader_interface import LoaderInterface
from .loader_json import JsonAbbreviationLoader

__all__ = ["LoaderInterface", "JsonAbbreviationLoader"]

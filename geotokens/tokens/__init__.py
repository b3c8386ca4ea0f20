"""
HTTP endpoints exposing the token engine.
"""
from .router import router

__all__ = ["router"]

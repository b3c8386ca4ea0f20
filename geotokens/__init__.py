"""
geotokens - address token normalization service.
"""

__version__ = "1.0.0"

"""
Test fixtures for token engine unit tests
"""

from .abbreviation_data import (
    MockAbbreviationLoader,
    street_saint_tables,
    sample_groups,
)

__all__ = [
    'MockAbbreviationLoader',
    'street_saint_tables',
    'sample_groups',
]

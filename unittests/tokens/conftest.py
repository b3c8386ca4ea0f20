#!/usr/bin/env python3
"""
Pytest configuration and fixtures for token engine tests

Engines built from the bundled abbreviation files are session-scoped: the
tables are immutable, so every test can share them.
"""

import os
import sys

import pytest
import pytest_asyncio

# Add project root to Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '../../'))
sys.path.insert(0, project_root)

from geotokens.data.cache.cache_memory import InMemoryCache
from geotokens.data.loaders.loader_json import JsonAbbreviationLoader
from geotokens.data.registry import DataRegistry
from geotokens.text import TokenEngine
from unittests.fixtures import MockAbbreviationLoader, street_saint_tables


@pytest.fixture(scope="session")
def bundled_loader():
    """Session-scoped loader over the bundled abbreviation files"""
    return JsonAbbreviationLoader()


def _engine_for(loader, *languages):
    return TokenEngine.from_groups({lang: loader.read_language(lang) for lang in languages})


@pytest.fixture(scope="session")
def en_engine(bundled_loader):
    return _engine_for(bundled_loader, "en")


@pytest.fixture(scope="session")
def es_engine(bundled_loader):
    return _engine_for(bundled_loader, "es")


@pytest.fixture(scope="session")
def de_engine(bundled_loader):
    return _engine_for(bundled_loader, "de")


@pytest.fixture
def empty_engine():
    return TokenEngine()


@pytest.fixture
def street_engine():
    return TokenEngine(street_saint_tables())


@pytest.fixture
def mock_loader():
    return MockAbbreviationLoader()


@pytest_asyncio.fixture
async def data_registry(mock_loader):
    """Function-scoped DataRegistry over the mock loader"""
    return DataRegistry(loader=mock_loader, cache=InMemoryCache())

#!/usr/bin/env python3
"""
Mock abbreviation loader for testing the registry and factory
Provides the same interface as the JSON loader but with in-memory groups
"""

from typing import Dict, List, Optional

from geotokens.data.loaders.loader_interface import LoaderInterface
from geotokens.text.exceptions import UnknownLanguageError
from geotokens.text.models import CanonicalEntry, SemanticType, TokenGroup
from geotokens.text.tables import TokenTables


def sample_groups() -> Dict[str, List[TokenGroup]]:
    """Small two-language data set with every kind of group"""
    return {
        "en": [
            TokenGroup("st", ("st", "street"), SemanticType.WAY),
            TokenGroup("av", ("av", "avenue"), SemanticType.WAY),
            TokenGroup("nw", ("nw", "northwest"), SemanticType.CARDINAL),
        ],
        "xx": [
            TokenGroup("$1 gata", (r"(\w+)gatan\b",), SemanticType.WAY, is_regex=True),
            TokenGroup("gata", ("gata", "gatan"), SemanticType.WAY),
            TokenGroup("gv", ("gran via", "gv"), span_boundaries=0),
            TokenGroup("de", ("de",), SemanticType.DETERMINER),
        ],
    }


def street_saint_tables() -> TokenTables:
    """Tables where both 'street' and 'saint' canonicalize to 'st'"""
    return TokenTables.from_maps(
        exact={
            "barter": CanonicalEntry("foo"),
            "saint": CanonicalEntry("st"),
            "street": CanonicalEntry("st", SemanticType.WAY),
        },
        regex={},
        phrases={},
    )


class MockAbbreviationLoader(LoaderInterface):
    """Mock loader serving fixed groups and counting loads per language"""

    def __init__(self, groups: Optional[Dict[str, List[TokenGroup]]] = None):
        self.groups = groups if groups is not None else sample_groups()
        self.calls: Dict[str, int] = {}

    async def load_abbreviations(self, language: str) -> List[TokenGroup]:
        self.calls[language] = self.calls.get(language, 0) + 1
        if language not in self.groups:
            raise UnknownLanguageError(language)
        return list(self.groups[language])

    async def list_languages(self) -> List[str]:
        return sorted(self.groups)

    async def test_connection(self) -> bool:
        return True

"""
Token Pipeline - canonicalization of address text
-------------------------------------------------
regex rules → phrase rules → re-tokenize → exact token lookup → "st" resolution

The engine is built once from token tables and never mutated afterwards, so
one instance can serve any number of concurrent calls.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .core.diacritics import diacritics
from .core.tokenizer import tokenize, tokenize_to_string
from .countries import (
    ST_DISAMBIGUATION,
    SUBSTITUTION_SKIP,
    normalize_country,
    runs_st_disambiguation,
    runs_substitution,
)
from .disambiguate import resolve_st
from .models import AnnotatedToken, TokenGroup
from .tables import TokenTables, build_tables

logger = logging.getLogger(__name__)


class TokenEngine:
    def __init__(
        self,
        tables: Optional[TokenTables] = None,
        *,
        skip_countries: Optional[Mapping[str, bool]] = None,
        disambiguation_countries: Optional[Mapping[str, bool]] = None,
    ):
        self.tables = tables or TokenTables.empty()
        self.skip_countries = dict(SUBSTITUTION_SKIP if skip_countries is None else skip_countries)
        self.disambiguation_countries = dict(
            ST_DISAMBIGUATION if disambiguation_countries is None else disambiguation_countries
        )

    @classmethod
    def from_groups(
        cls,
        groups_by_language: Mapping[str, Iterable[TokenGroup]],
        **kwargs,
    ) -> "TokenEngine":
        return cls(build_tables(groups_by_language), **kwargs)

    @property
    def languages(self) -> List[str]:
        return list(self.tables.languages)

    # --------------------------
    # Public API
    # --------------------------

    def tokenize(self, text: str) -> List[str]:
        return tokenize(text)

    def tokenize_to_string(self, text: str) -> str:
        return tokenize_to_string(text)

    def process(self, text: str, country: Optional[str] = "") -> List[AnnotatedToken]:
        """Tokenize ``text`` and annotate every token with its canonical form.

        Args:
            text: Free-form address fragment
            country: ISO 3166 alpha-2 code; may be empty

        Returns:
            One AnnotatedToken per token, in input order
        """
        code = normalize_country(country)
        tokens = tokenize(text)

        if runs_substitution(code, self.skip_countries):
            tokens = tokenize(self.substitute(text))

        annotated = [self._lookup(token) for token in tokens]

        if runs_st_disambiguation(code, self.disambiguation_countries):
            annotated = resolve_st(tokens, annotated)
        return annotated

    def substitute(self, text: str) -> str:
        """Apply every regex rule, then every phrase rule, to the folded text."""
        full_text = diacritics(text.lower())
        for rule in self.tables.regex_rules:
            full_text = rule.apply(full_text)
        for phrase, entry in self.tables.phrase_rules:
            full_text = full_text.replace(phrase, entry.canonical)
        return full_text

    def describe(self) -> Dict[str, Any]:
        return {
            "languages": self.languages,
            **self.tables.stats(),
            "skip_countries": sorted(k for k, v in self.skip_countries.items() if v),
            "disambiguation_countries": sorted(k for k, v in self.disambiguation_countries.items() if v),
        }

    # --------------------------
    # Internals
    # --------------------------

    def _lookup(self, token: str) -> AnnotatedToken:
        entry = self.tables.exact.get(token)
        if entry is None:
            return AnnotatedToken(token)
        return AnnotatedToken(entry.canonical, entry.semantic_type)

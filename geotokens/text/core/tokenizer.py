"""
tokenizer.py - text normalizer

Lowercases, folds accents and rewrites punctuation, then splits the result
into raw tokens. Every step is a precompiled regex applied in a fixed order.
"""

import re
from typing import List

from .diacritics import diacritics

_CARET_RE = re.compile(r"\^+")
# Periods and period-like quote marks are deleted outright: b.a.r -> bar
_PERIOD_PUNC_RE = re.compile(r"[\u2018\u2019\u02BC\u02BB\uFF07.]")
# Elided articles before a vowel, also at the end of a word: l'onze -> l onze, dell'acqua -> dell acqua
_ELISION_RE = re.compile(r"([ld])'([aeiouhy][^ ]+)")
_APOSTROPHE_RE = re.compile(r"'")
# General punctuation, supplemental punctuation and ASCII punctuation (incl. - and _)
_SPACE_PUNC_RE = re.compile(r"[\u2000-\u206F\u2E00-\u2E7F\\'!\"$#%&()*+,./:;<=>?@\[\]^_`{|}~-]")
_SPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Run the character-level rewrite and return the space-joined result."""
    normalized = diacritics(text.strip().lower())
    normalized = _CARET_RE.sub("", normalized)
    normalized = _PERIOD_PUNC_RE.sub("", normalized)
    normalized = _ELISION_RE.sub(r"\1 \2", normalized)
    normalized = _APOSTROPHE_RE.sub("", normalized)
    normalized = _SPACE_PUNC_RE.sub(" ", normalized)
    normalized = _SPACE_RE.sub(" ", normalized)
    return normalized.strip()


def tokenize(text: str) -> List[str]:
    """Split ``text`` into normalized tokens; empty input gives an empty list."""
    return [token for token in normalize_text(text).split(" ") if token]


def tokenize_to_string(text: str) -> str:
    return " ".join(tokenize(text))

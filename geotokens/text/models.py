"""
Token datatypes shared by the loader, table builder and pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class SemanticType(str, Enum):
    """Coarse role of a token inside an address."""
    WAY = "way"
    CARDINAL = "cardinal"
    DETERMINER = "determiner"
    NUMBER = "number"
    ORDINAL = "ordinal"
    UNIT = "unit"
    POSTALBOX = "postalbox"


@dataclass(frozen=True)
class TokenGroup:
    """One abbreviation group: every synonym maps to ``canonical``."""
    canonical: str
    synonyms: Tuple[str, ...]
    semantic_type: Optional[SemanticType] = None
    is_regex: bool = False
    span_boundaries: Optional[int] = None

    @property
    def is_multi_word(self) -> bool:
        return self.span_boundaries is not None


@dataclass(frozen=True)
class CanonicalEntry:
    canonical: str
    semantic_type: Optional[SemanticType] = None


@dataclass(frozen=True)
class AnnotatedToken:
    token: str
    token_type: Optional[SemanticType] = field(default=None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "token": self.token,
            "token_type": self.token_type.value if self.token_type else None,
        }

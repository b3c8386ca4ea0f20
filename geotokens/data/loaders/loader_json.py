"""
JSON file loader for abbreviation data.

Each language lives in ``<directory>/<language>.json`` as a list of groups:

    {"canonical": "av", "tokens": ["av", "ave", "avenue"], "type": "way"}

Optional keys are ``regex`` (tokens are patterns) and ``spanBoundaries``
(tokens are multi-word phrases). Unknown keys are ignored.
"""
import json
import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from .loader_interface import LoaderInterface
from ...text.exceptions import TokenConfigurationError, UnknownLanguageError
from ...text.models import SemanticType, TokenGroup

logger = logging.getLogger(__name__)

BUNDLED_DIR = Path(__file__).resolve().parent.parent / "abbreviations"

_LANGUAGE_RE = re.compile(r"^[a-z]{2,3}(?:[_-][a-z0-9]{2,8})?$", re.IGNORECASE)


class AbbreviationRecord(BaseModel):
    """One group as stored in the abbreviation files."""
    canonical: str
    tokens: List[str] = Field(..., min_length=1)
    type: Optional[str] = None
    regex: bool = False
    span_boundaries: Optional[int] = Field(None, alias="spanBoundaries")

    class Config:
        populate_by_name = True
        extra = "ignore"

    def to_group(self) -> TokenGroup:
        try:
            semantic_type = SemanticType(self.type.lower()) if self.type else None
        except ValueError:
            raise TokenConfigurationError(
                f"Unknown token type '{self.type}' for canonical '{self.canonical}'"
            ) from None
        return TokenGroup(
            canonical=self.canonical,
            synonyms=tuple(self.tokens),
            semantic_type=semantic_type,
            is_regex=self.regex,
            span_boundaries=self.span_boundaries,
        )


class JsonAbbreviationLoader(LoaderInterface):
    """Reads per-language abbreviation files from a directory."""

    def __init__(self, directory: Optional[Union[str, Path]] = None):
        self.directory = Path(directory) if directory else BUNDLED_DIR
        logger.info(f"📚 JsonAbbreviationLoader reading from {self.directory}")

    def _path_for(self, language: str) -> Path:
        if not _LANGUAGE_RE.match(language or ""):
            raise UnknownLanguageError(language)
        return self.directory / f"{language.lower()}.json"

    def read_language(self, language: str) -> List[TokenGroup]:
        """Synchronously parse the groups for ``language``."""
        path = self._path_for(language)
        if not path.is_file():
            raise UnknownLanguageError(language)

        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise TokenConfigurationError(f"Malformed abbreviation file {path}: {e}") from e

        if not isinstance(raw, list):
            raise TokenConfigurationError(f"Abbreviation file {path} must contain a list of groups")

        groups: List[TokenGroup] = []
        for i, record in enumerate(raw):
            try:
                groups.append(AbbreviationRecord.model_validate(record).to_group())
            except ValidationError as e:
                raise TokenConfigurationError(f"Invalid group #{i} in {path}: {e}") from e

        logger.debug(f"Loaded {len(groups)} abbreviation groups for '{language}'")
        return groups

    async def load_abbreviations(self, language: str) -> List[TokenGroup]:
        return self.read_language(language)

    async def list_languages(self) -> List[str]:
        return sorted(p.stem for p in self.directory.glob("*.json"))

    async def test_connection(self) -> bool:
        return self.directory.is_dir()

"""
Loader interface for abbreviation data.
"""
from abc import ABC, abstractmethod
from typing import List

from ...text.models import TokenGroup


class LoaderInterface(ABC):
    """Abstract base class for abbreviation loaders."""

    @abstractmethod
    async def load_abbreviations(self, language: str) -> List[TokenGroup]:
        """Load the token groups for one language.

        Raises UnknownLanguageError when the language has no data.
        """
        pass

    @abstractmethod
    async def list_languages(self) -> List[str]:
        """List the language codes this loader can serve."""
        pass

    @abstractmethod
    async def test_connection(self) -> bool:
        """Test if the underlying source is reachable."""
        pass

"""
TokenizerFactory - async factory for creating sync TokenEngine instances

Abbreviation data is loaded asynchronously through the DataRegistry once;
the resulting engine works purely in memory.
"""

import logging
from typing import Iterable, Mapping, Optional

from .pipeline import TokenEngine

logger = logging.getLogger(__name__)


class TokenizerFactory:
    """
    Factory for creating TokenEngine instances with async data loading.

    This pattern allows us to:
    1. Load all abbreviation data async once
    2. Build immutable token tables in memory
    3. Keep async/await out of the per-call tokenization path
    """

    @staticmethod
    async def create(
        data_registry,
        languages: Iterable[str],
        skip_countries: Optional[Mapping[str, bool]] = None,
        disambiguation_countries: Optional[Mapping[str, bool]] = None,
    ) -> TokenEngine:
        """
        Create a TokenEngine for the given languages.

        Args:
            data_registry: DataRegistry used to load abbreviation groups
            languages: Language codes, in rule priority order
            skip_countries: Override for the substitution skip table
            disambiguation_countries: Override for the "st" resolution table

        Returns:
            TokenEngine: Fully built engine

        Raises:
            TokenConfigurationError: a language is unknown or its data is invalid
        """
        languages = list(languages)
        logger.info(f"🏭 Creating TokenEngine for languages {languages}")

        try:
            groups = await data_registry.get_token_groups(languages)
            engine = TokenEngine.from_groups(
                groups,
                skip_countries=skip_countries,
                disambiguation_countries=disambiguation_countries,
            )
        except Exception as e:
            logger.error(f"❌ Failed to create TokenEngine: {e}")
            raise

        logger.info(f"✅ TokenEngine created: {engine.tables.stats()}")
        return engine

    @staticmethod
    async def create_default(data_registry, settings) -> TokenEngine:
        """Convenience method building the engine for the configured languages."""
        return await TokenizerFactory.create(data_registry, settings.get_languages())

"""
DataRegistry - cache-first access to abbreviation data.

Coordinates between cache and loader; loader failures are never masked.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from .cache.cache_interface import CacheInterface
from .loaders.loader_interface import LoaderInterface
from ..text.models import TokenGroup

logger = logging.getLogger(__name__)


class DataRegistry:
    """
    Central data registry with cache + loader architecture.

    Features:
    - Cache-first lookups with TTL
    - Fail-fast when a language cannot be loaded
    - Cache hydration and invalidation per language
    """

    def __init__(self, loader: LoaderInterface, cache: CacheInterface, ttl: Optional[int] = 3600):
        self.loader = loader
        self.cache = cache
        self._default_ttl = ttl

        logger.info("🗄️  DataRegistry initialized")

    @staticmethod
    def _cache_key(language: str) -> str:
        return f"abbreviations:{language.lower()}"

    async def get_abbreviations(self, language: str, force_reload: bool = False) -> List[TokenGroup]:
        """Get the token groups for one language, loading them on a cache miss."""
        cache_key = self._cache_key(language)

        if not force_reload:
            cached = await self.cache.get(cache_key)
            if cached is not None:
                logger.debug(f"✅ Abbreviation cache hit for '{language}'")
                return cached

        logger.debug(f"🔄 Loading abbreviations for '{language}'")
        groups = await self.loader.load_abbreviations(language)
        await self.cache.set(cache_key, groups, self._default_ttl)
        logger.debug(f"💾 Cached {len(groups)} groups for '{language}'")
        return groups

    async def get_token_groups(self, languages: Iterable[str]) -> Dict[str, List[TokenGroup]]:
        """Groups for every requested language, in request order, duplicates dropped."""
        result: Dict[str, List[TokenGroup]] = {}
        for language in languages:
            key = language.lower()
            if key not in result:
                result[key] = await self.get_abbreviations(key)
        return result

    async def invalidate(self, language: str) -> bool:
        removed = await self.cache.delete(self._cache_key(language))
        if removed:
            logger.debug(f"🗑️  Invalidated abbreviation cache for '{language}'")
        return removed

    async def hydrate_cache(self, languages: Iterable[str]) -> None:
        """Pre-load every language so engine construction never hits the loader."""
        languages = list(languages)
        logger.info(f"🔄 Hydrating abbreviation cache for {languages}")
        for language in languages:
            await self.get_abbreviations(language, force_reload=True)
        logger.info("✅ Abbreviation cache hydrated")

    async def get_cache_stats(self) -> Dict[str, Any]:
        return await self.cache.get_stats()

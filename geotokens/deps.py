"""
Dependencies and dependency injection setup.
"""
import logging

from fastapi import HTTPException, Request, status

from geotokens.settings import Settings
from geotokens.data import DataRegistry, InMemoryCache, JsonAbbreviationLoader
from geotokens.text import TokenEngine

logger = logging.getLogger(__name__)


def get_data_registry(settings: Settings) -> DataRegistry:
    """Get data registry with cache and loader."""
    cache = InMemoryCache(default_ttl=settings.abbreviation_cache_ttl)
    logger.info("InMemory cache initialized")

    loader = JsonAbbreviationLoader(settings.abbreviations_dir)
    logger.info("JsonAbbreviationLoader initialized")

    registry = DataRegistry(loader, cache, ttl=settings.abbreviation_cache_ttl)
    logger.info("DataRegistry initialized")
    return registry


def setup_dependencies(settings: Settings):
    """Setup all dependencies and return them."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    return {
        "data_registry": get_data_registry(settings),
        "settings": settings,
    }


def get_token_engine(request: Request) -> TokenEngine:
    """Dependency to get the token engine from app state."""
    engine = getattr(request.app.state, "token_engine", None)
    if engine is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Token engine not initialized"
        )
    return engine


def get_registry(request: Request) -> DataRegistry:
    """Dependency to get data registry from app state."""
    return request.app.state.data_registry

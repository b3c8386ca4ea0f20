"""
Main FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geotokens import __version__
from geotokens.deps import setup_dependencies
from geotokens.tokens import router as tokens_router
from geotokens.text import TokenizerFactory

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan handler for startup and shutdown tasks."""
    logger.info("🚀 Starting token server lifespan...")

    settings = app.state.settings
    data_registry = app.state.data_registry
    languages = settings.get_languages()

    try:
        await data_registry.hydrate_cache(languages)
        app.state.token_engine = await TokenizerFactory.create(data_registry, languages)
    except Exception as e:
        logger.error(f"❌ Token engine initialization failed: {e}")
        raise

    logger.info("🚀 All systems operational")

    yield

    logger.info("🛑 Shutting down token server...")
    app.state.token_engine = None


def create_app(settings=None) -> FastAPI:
    """Create and configure FastAPI application."""

    # Use provided settings or get default
    if settings is None:
        from geotokens.settings import get_settings
        settings = get_settings()

    deps = setup_dependencies(settings)

    app = FastAPI(
        title="geotokens - Address Token Server",
        version=__version__,
        description=f"Running in {settings.app_env} mode",
        lifespan=lifespan
    )

    # Store dependencies in app state
    app.state.settings = settings
    app.state.data_registry = deps["data_registry"]
    app.state.token_engine = None

    if settings.cors_enabled:
        logger.info("CORS middleware ENABLED")
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.get_allowed_origins(),
            allow_credentials=False,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
            max_age=3600,
        )

    app.include_router(tokens_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        engine_ready = getattr(app.state, "token_engine", None) is not None
        return {
            "status": "healthy" if engine_ready else "starting",
            "service": "geotokens",
            "languages": settings.get_languages(),
        }

    return app


def run():
    import uvicorn
    from geotokens.settings import get_settings

    settings = get_settings()

    logger.info(f"🚀 Starting token server in {str(settings.app_env).upper()} mode")
    logger.info(f"🌐 Server: {settings.host}:{settings.port}")
    logger.info(f"📚 Languages: {settings.get_languages()}")

    if settings.is_development:
        # In development, use factory import string for reload support
        uvicorn.run(
            "geotokens.main:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            reload=True,
            log_level=settings.log_level.lower()
        )
    else:
        uvicorn.run(
            create_app(settings),
            host=settings.host,
            port=settings.port,
            reload=False,
            log_level=settings.log_level.lower()
        )


if __name__ == "__main__":
    run()

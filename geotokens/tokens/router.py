"""
FastAPI router for token endpoints.

Marshals address text in, runs the token engine, and marshals annotated
tokens back out. Failures inside the engine are reported as a generic
processing error; the engine itself is never modified by a request.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from .schemas import (
    EngineInfoResponse,
    NormalizeRequest,
    NormalizeResponse,
    TokenizeRequest,
    TokenizeResponse,
    TokenSchema,
)
from ..deps import get_registry, get_token_engine
from ..data.registry import DataRegistry
from ..text.countries import normalize_country
from ..text.pipeline import TokenEngine

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api/tokens", tags=["tokens"])


@router.post("/tokenize", response_model=TokenizeResponse)
async def tokenize_name(
    request_data: TokenizeRequest,
    engine: TokenEngine = Depends(get_token_engine)
):
    """Canonicalize an address fragment into typed tokens."""
    try:
        tokenized = engine.process(request_data.text, request_data.country)
    except Exception as e:
        logger.error(f"❌ Token processing failed for {request_data.text!r}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Token processing error"
        )

    return TokenizeResponse(
        tokens=[TokenSchema(**tk.to_dict()) for tk in tokenized],
        country=normalize_country(request_data.country),
        languages=engine.languages,
    )


@router.post("/normalize", response_model=NormalizeResponse)
async def normalize_text(
    request_data: NormalizeRequest,
    engine: TokenEngine = Depends(get_token_engine)
):
    """Split text into normalized tokens without canonicalization."""
    return NormalizeResponse(tokens=engine.tokenize(request_data.text))


@router.get("/info", response_model=EngineInfoResponse)
async def engine_info(engine: TokenEngine = Depends(get_token_engine)):
    """Describe the loaded token tables."""
    return EngineInfoResponse(**engine.describe())


@router.get("/cache")
async def cache_stats(registry: DataRegistry = Depends(get_registry)):
    """Abbreviation cache statistics."""
    return await registry.get_cache_stats()

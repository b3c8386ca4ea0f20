"""
Pydantic schemas for token endpoints.
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class TokenizeRequest(BaseModel):
    """Request schema for canonicalizing an address fragment."""
    text: str = Field(..., description="Free-form address text")
    country: Optional[str] = Field("", max_length=8, description="ISO 3166 alpha-2 country code")


class NormalizeRequest(BaseModel):
    """Request schema for plain tokenization without canonicalization."""
    text: str


class TokenSchema(BaseModel):
    token: str
    token_type: Optional[str] = None


class TokenizeResponse(BaseModel):
    tokens: List[TokenSchema]
    country: str
    languages: List[str]


class NormalizeResponse(BaseModel):
    tokens: List[str]


class EngineInfoResponse(BaseModel):
    languages: List[str]
    exact_tokens: int
    regex_rules: int
    phrases: int
    skip_countries: List[str]
    disambiguation_countries: List[str]

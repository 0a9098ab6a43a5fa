"""Pydantic models for the quote service."""

from wayfinder.models.quote import ErrorResponse, HopLeg, PoolSnapshot, QuoteRequest, QuoteResponse
from wayfinder.models.types import U64, AssetId, PoolId

__all__ = [
    # Types
    "U64",
    "AssetId",
    "PoolId",
    # Quote service models
    "ErrorResponse",
    "HopLeg",
    "PoolSnapshot",
    "QuoteRequest",
    "QuoteResponse",
]

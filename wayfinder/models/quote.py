"""Pydantic models for the quote service.

These are the wire shapes of the HTTP surface only. The routing core works
on ConstantProductPool dataclasses and plain ints.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from wayfinder.models.types import U64, AssetId, PoolId


class PoolSnapshot(BaseModel):
    """A pool as submitted by the caller.

    Pool invariants (distinct assets, fee range) are not checked here.
    Snapshots that break them are dropped at ingestion instead of failing
    the whole request.
    """

    address: PoolId
    asset_a: AssetId = Field(alias="assetA")
    asset_b: AssetId = Field(alias="assetB")
    fee_bps: int = Field(alias="feeBps")
    reserve_a: U64 = Field(alias="reserveA")
    reserve_b: U64 = Field(alias="reserveB")

    model_config = {"populate_by_name": True}


class QuoteRequest(BaseModel):
    """Request for the best route between two assets."""

    input_asset: AssetId = Field(alias="inputAsset")
    output_asset: AssetId = Field(alias="outputAsset")
    amount_in: U64 = Field(alias="amountIn", gt=0)
    max_hops: int | None = Field(default=None, alias="maxHops", ge=1)
    pools: list[PoolSnapshot] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class HopLeg(BaseModel):
    """One pool traversal within a quoted route."""

    pool: PoolId
    asset_in: AssetId = Field(alias="assetIn")
    asset_out: AssetId = Field(alias="assetOut")
    amount_in: str = Field(alias="amountIn")
    amount_out: str = Field(alias="amountOut")
    fee: str

    model_config = {"populate_by_name": True}


class QuoteResponse(BaseModel):
    """Best route found for a QuoteRequest.

    Amounts are serialized as decimal strings.
    """

    route: list[PoolId]
    hops: int
    amount_in: str = Field(alias="amountIn")
    amount_out: str = Field(alias="amountOut")
    fee: str
    price_impact: Decimal = Field(
        alias="priceImpact",
        description="Price impact of the whole route, in percent.",
    )
    legs: list[HopLeg]

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """Error body returned by the quote service."""

    detail: str
    code: str

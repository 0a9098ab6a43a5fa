"""Swap quotes built on top of the route search.

A quote replays the best route hop by hop to report the amounts each pool
sees, the fee each pool retains, and how far the execution price is from the
spot price implied by the reserves.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

import structlog

from wayfinder.amm.constant_product import ConstantProductPool, constant_product
from wayfinder.constants import DEFAULT_MAX_HOPS, FEE_DENOMINATOR
from wayfinder.routing.search import RouteSearch
from wayfinder.routing.types import HopQuote, RouteResult, SwapQuote

logger = structlog.get_logger()

# Price impact is reported in percent with four decimals (basis-point hundredths)
PRICE_IMPACT_QUANTUM = Decimal("0.0001")


def price_impact(reserve_in: int, reserve_out: int, amount_in: int, amount_out: int) -> Decimal:
    """Price impact of a single swap, in percent.

    impact = (1 - execution_price / spot_price) * 100, where
    spot_price = reserve_out / reserve_in and
    execution_price = amount_out / amount_in.
    The pool fee is part of the impact.

    Returns:
        Decimal percentage; 0 when the trade or the pool is empty
    """
    if amount_in <= 0 or reserve_in <= 0 or reserve_out <= 0:
        return Decimal(0)
    spot_output = Decimal(amount_in) * Decimal(reserve_out) / Decimal(reserve_in)
    return _impact(spot_output, amount_out)


def _impact(spot_output: Decimal, amount_out: int) -> Decimal:
    impact = (Decimal(1) - Decimal(amount_out) / spot_output) * 100
    return impact.quantize(PRICE_IMPACT_QUANTUM, rounding=ROUND_HALF_UP)


def build_swap_quote(result: RouteResult, amount_in: int) -> SwapQuote:
    """Replay a search result into a SwapQuote.

    Each hop is priced on the pool object the search traversed, so pools
    sharing an address in one snapshot cannot be confused.

    Args:
        result: Route returned by the search engine
        amount_in: Input amount the route was searched with

    Returns:
        SwapQuote with per-hop legs, total fee and route price impact

    Raises:
        ValueError: If a hop cannot be priced (the result does not come
            from a search over its own pools)
    """
    legs: list[HopQuote] = []
    current_amount = amount_in
    spot_output = Decimal(amount_in)

    for i, pool in enumerate(result.pools):
        asset_in = result.assets[i]
        asset_out = result.assets[i + 1]
        amount_out = constant_product.quote(pool, asset_in, current_amount)
        reserves = pool.get_reserves(asset_in)
        if amount_out is None or reserves is None:
            raise ValueError(f"Route hop {i} through {pool.address} cannot be priced")
        reserve_in, reserve_out = reserves
        spot_output = spot_output * Decimal(reserve_out) / Decimal(reserve_in)

        legs.append(
            HopQuote(
                pool=pool.address,
                asset_in=asset_in,
                asset_out=asset_out,
                amount_in=current_amount,
                amount_out=amount_out,
                fee=current_amount * pool.fee_bps // FEE_DENOMINATOR,
            )
        )
        current_amount = amount_out

    impact = _impact(spot_output, current_amount) if legs else Decimal(0)

    return SwapQuote(
        amount_in=amount_in,
        amount_out=current_amount,
        route=result.route,
        legs=tuple(legs),
        fee=sum(leg.fee for leg in legs),
        price_impact=impact,
    )


def quote_route(
    pools: Sequence[ConstantProductPool],
    input_asset: str,
    output_asset: str,
    amount_in: int,
    max_hops: int = DEFAULT_MAX_HOPS,
) -> SwapQuote:
    """Find the best route and quote it.

    Raises:
        InvalidRoute: If input_asset == output_asset
        NoValidPath: If no route reaches output_asset within max_hops
    """
    result = RouteSearch(pools, max_hops).find_optimal_route(input_asset, output_asset, amount_in)
    swap_quote = build_swap_quote(result, amount_in)

    logger.debug(
        "route_quoted",
        hops=swap_quote.hops,
        amount_out=swap_quote.amount_out,
        fee=swap_quote.fee,
        price_impact=str(swap_quote.price_impact),
    )
    return swap_quote


__all__ = ["build_swap_quote", "price_impact", "quote_route"]

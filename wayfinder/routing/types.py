"""Type definitions for routing module."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from wayfinder.amm.constant_product import ConstantProductPool


@dataclass
class SearchPath:
    """A partial route on the search frontier.

    Exists only within one search invocation.
    """

    asset: str
    amount_out: int
    hops: int
    # Pools traversed in order, the exact snapshot objects priced by the search
    pools: list[ConstantProductPool] = field(default_factory=list)
    # Assets visited in order, starting with the input asset
    assets: list[str] = field(default_factory=list)

    def extend(self, pool: ConstantProductPool, next_asset: str, amount_out: int) -> SearchPath:
        """Return a new path one hop longer through the given pool."""
        return SearchPath(
            asset=next_asset,
            amount_out=amount_out,
            hops=self.hops + 1,
            pools=[*self.pools, pool],
            assets=[*self.assets, next_asset],
        )


@dataclass(frozen=True)
class RouteResult:
    """Best route found by the search engine."""

    route: tuple[str, ...]
    amount_out: int
    # Input asset first, output asset last; one more entry than route
    assets: tuple[str, ...]
    # Pool objects behind route; addresses need not be unique in a snapshot
    pools: tuple[ConstantProductPool, ...]

    @property
    def hops(self) -> int:
        """Number of pools in the route."""
        return len(self.route)


@dataclass(frozen=True)
class HopQuote:
    """Result of a single hop in a quoted route."""

    pool: str
    asset_in: str
    asset_out: str
    amount_in: int
    amount_out: int
    # Fee retained by the pool, in units of asset_in
    fee: int


@dataclass(frozen=True)
class SwapQuote:
    """Quote for swapping a fixed input along the best route."""

    amount_in: int
    amount_out: int
    route: tuple[str, ...]
    legs: tuple[HopQuote, ...]
    fee: int
    # Percent, e.g. Decimal("0.4") for 0.4%
    price_impact: Decimal

    @property
    def hops(self) -> int:
        return len(self.route)


__all__ = ["HopQuote", "RouteResult", "SearchPath", "SwapQuote"]

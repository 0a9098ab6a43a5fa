"""Constant-product AMM pricing.

Pools hold two reserves whose product is invariant (ignoring fees): x * y = k.
The fee is taken from the input before the trade and stays in the pool.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from wayfinder.constants import FEE_DENOMINATOR
from wayfinder.errors import CalculationOverflow, InvalidPoolState
from wayfinder.safe_int import S

if TYPE_CHECKING:
    from wayfinder.models.quote import PoolSnapshot

logger = structlog.get_logger()


@dataclass(frozen=True)
class ConstantProductPool:
    """Immutable snapshot of a two-asset constant-product pool."""

    address: str
    asset_a: str
    asset_b: str
    # Fee in basis points (30 = 0.3%)
    fee_bps: int
    reserve_a: int
    reserve_b: int

    def __post_init__(self) -> None:
        if self.asset_a == self.asset_b:
            raise InvalidPoolState(f"Pool {self.address} connects {self.asset_a} to itself")
        if not 0 <= self.fee_bps < FEE_DENOMINATOR:
            raise InvalidPoolState(
                f"Pool {self.address} fee {self.fee_bps} bps outside [0, {FEE_DENOMINATOR})"
            )
        if self.reserve_a < 0 or self.reserve_b < 0:
            raise InvalidPoolState(f"Pool {self.address} has a negative reserve")

    @property
    def fee_multiplier(self) -> int:
        """Fee multiplier for AMM math (10000 - fee_bps).

        For 30 bps (0.3%), this returns 9970.
        """
        return FEE_DENOMINATOR - self.fee_bps

    def get_reserves(self, asset_in: str) -> tuple[int, int] | None:
        """Get reserves ordered as (reserve_in, reserve_out), or None if not in pool."""
        if asset_in == self.asset_a:
            return self.reserve_a, self.reserve_b
        if asset_in == self.asset_b:
            return self.reserve_b, self.reserve_a
        return None

    def connected_asset(self, asset: str) -> str | None:
        """Get the asset on the other side of the pool, or None if not in pool."""
        if asset == self.asset_a:
            return self.asset_b
        if asset == self.asset_b:
            return self.asset_a
        return None


class ConstantProduct:
    """Constant-product AMM math.

    Formula: amount_out = (in * fee * res_out) / (res_in * 10000 + in * fee)

    Inputs are 64-bit, intermediates 128-bit, and the result is narrowed back
    to 64 bits; any step that does not fit raises CalculationOverflow.
    """

    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        fee_multiplier: int = 9970,
    ) -> int:
        """Calculate output amount using constant product formula.

        Args:
            amount_in: Input token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool
            fee_multiplier: 10000 - fee_bps (default 9970 for 0.3% fee)

        Returns:
            Output token amount (0 for zero input or an empty pool)

        Raises:
            CalculationOverflow: If an input, intermediate or the result does
                not fit its width
        """
        amount = S.u64(amount_in)
        res_in = S.u64(reserve_in)
        res_out = S.u64(reserve_out)

        if not amount or not res_in or not res_out:
            return 0

        if S(fee_multiplier) > FEE_DENOMINATOR:
            raise CalculationOverflow(f"Fee multiplier {fee_multiplier} exceeds {FEE_DENOMINATOR}")

        amount_in_with_fee = S(amount) * S(fee_multiplier)
        numerator = amount_in_with_fee * res_out
        denominator = S(res_in) * S(FEE_DENOMINATOR) + amount_in_with_fee

        return (numerator // denominator).to_u64()

    def quote(
        self,
        pool: ConstantProductPool,
        input_asset: str,
        amount_in: int,
    ) -> int | None:
        """Price a trade through one pool.

        Args:
            pool: The liquidity pool
            input_asset: Asset being sold, must be one side of the pool
            amount_in: Amount to sell

        Returns:
            Output amount, or None if the asset is not in the pool or the
            trade cannot be priced without overflow
        """
        reserves = pool.get_reserves(input_asset)
        if reserves is None:
            return None
        reserve_in, reserve_out = reserves
        try:
            return self.get_amount_out(amount_in, reserve_in, reserve_out, pool.fee_multiplier)
        except CalculationOverflow as err:
            logger.debug(
                "quote_overflow",
                pool=pool.address[-8:],
                amount_in=amount_in,
                error=str(err),
            )
            return None


# Singleton instance
constant_product = ConstantProduct()


def quote(pool: ConstantProductPool, input_asset: str, amount_in: int) -> int | None:
    """Price a trade through one pool with the shared AMM instance."""
    return constant_product.quote(pool, input_asset, amount_in)


def parse_pool_snapshot(snapshot: PoolSnapshot) -> ConstantProductPool | None:
    """Convert a wire PoolSnapshot to a ConstantProductPool.

    Args:
        snapshot: Pool as submitted by the caller

    Returns:
        ConstantProductPool, or None if the snapshot breaks a pool invariant
        (the pool is then treated as absent from the graph)
    """
    try:
        return ConstantProductPool(
            address=snapshot.address,
            asset_a=snapshot.asset_a,
            asset_b=snapshot.asset_b,
            fee_bps=snapshot.fee_bps,
            reserve_a=snapshot.reserve_a,
            reserve_b=snapshot.reserve_b,
        )
    except InvalidPoolState as err:
        logger.warning(
            "pool_snapshot_rejected",
            pool=snapshot.address[-8:],
            reason=str(err),
        )
        return None


__all__ = [
    "ConstantProduct",
    "ConstantProductPool",
    "constant_product",
    "parse_pool_snapshot",
    "quote",
]

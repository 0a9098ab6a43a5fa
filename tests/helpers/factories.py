"""Factory functions for creating test pools.

Usage:
    from tests.helpers import make_pool, make_chain

    pool = make_pool(ASSET_A, ASSET_B, reserve_a=10**6, reserve_b=2 * 10**6)
    pools = make_chain([ASSET_A, ASSET_B, ASSET_C])
"""

from wayfinder.amm.constant_product import ConstantProductPool
from tests.helpers.constants import DEFAULT_FEE_BPS


def make_pool(
    asset_a: str,
    asset_b: str,
    reserve_a: int = 1_000_000,
    reserve_b: int = 1_000_000,
    fee_bps: int = DEFAULT_FEE_BPS,
    address: str | None = None,
) -> ConstantProductPool:
    """Create a test pool with sensible defaults.

    The default address is derived from the asset pair, so pass an explicit
    address when building parallel pools for the same pair.
    """
    if address is None:
        address = f"pool-{asset_a[:4]}-{asset_b[:4]}"
    return ConstantProductPool(
        address=address,
        asset_a=asset_a,
        asset_b=asset_b,
        fee_bps=fee_bps,
        reserve_a=reserve_a,
        reserve_b=reserve_b,
    )


def make_chain(
    assets: list[str],
    reserve: int = 1_000_000,
    fee_bps: int = DEFAULT_FEE_BPS,
) -> list[ConstantProductPool]:
    """Create pools linking consecutive assets: assets[0]-assets[1], assets[1]-assets[2], ...

    Pool addresses are "chain-0", "chain-1", ... in order.
    """
    return [
        make_pool(
            assets[i],
            assets[i + 1],
            reserve_a=reserve,
            reserve_b=reserve,
            fee_bps=fee_bps,
            address=f"chain-{i}",
        )
        for i in range(len(assets) - 1)
    ]

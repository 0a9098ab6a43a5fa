"""AMM (Automated Market Maker) pricing."""

from wayfinder.amm.constant_product import (
    ConstantProduct,
    ConstantProductPool,
    constant_product,
    parse_pool_snapshot,
    quote,
)

__all__ = [
    "ConstantProduct",
    "ConstantProductPool",
    "constant_product",
    "parse_pool_snapshot",
    "quote",
]

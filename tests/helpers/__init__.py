"""Test helpers module for shared test utilities.

- constants: Asset identifiers and owners
- factories: Pool factory functions
"""

from tests.helpers.constants import (
    ASSET_A,
    ASSET_B,
    ASSET_C,
    ASSET_D,
    ASSET_E,
    DEFAULT_FEE_BPS,
    OWNER,
    STRANGER,
    U64_MAX,
)
from tests.helpers.factories import make_chain, make_pool

__all__ = [
    # Constants
    "ASSET_A",
    "ASSET_B",
    "ASSET_C",
    "ASSET_D",
    "ASSET_E",
    "DEFAULT_FEE_BPS",
    "OWNER",
    "STRANGER",
    "U64_MAX",
    # Factories
    "make_chain",
    "make_pool",
]

"""Pytest configuration and fixtures."""

import pytest

from wayfinder.amm.constant_product import ConstantProductPool
from tests.helpers import ASSET_A, ASSET_B, ASSET_C, make_pool


@pytest.fixture
def direct_pool() -> ConstantProductPool:
    """A/B pool with reserves (1M, 2M) and a 0.3% fee."""
    return make_pool(ASSET_A, ASSET_B, reserve_a=1_000_000, reserve_b=2_000_000, address="direct")


@pytest.fixture
def two_hop_pools() -> list[ConstantProductPool]:
    """A/B and B/C pools, each with reserves (1M, 1M) and a 0.3% fee."""
    return [
        make_pool(ASSET_A, ASSET_B, address="pool1"),
        make_pool(ASSET_B, ASSET_C, address="pool2"),
    ]

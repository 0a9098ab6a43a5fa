"""Tests for the token graph view."""

from wayfinder.routing.graph import TokenGraph, connected_asset
from tests.helpers import ASSET_A, ASSET_B, ASSET_C, ASSET_D, make_pool


class TestConnectedAsset:
    """Tests for connected_asset."""

    def test_other_side(self):
        pool = make_pool(ASSET_A, ASSET_B)
        assert connected_asset(pool, ASSET_A) == ASSET_B
        assert connected_asset(pool, ASSET_B) == ASSET_A

    def test_foreign_asset(self):
        pool = make_pool(ASSET_A, ASSET_B)
        assert connected_asset(pool, ASSET_C) is None


class TestTokenGraph:
    """Tests for TokenGraph neighbor lookup."""

    def test_empty_graph(self):
        graph = TokenGraph([])
        assert graph.pool_count == 0
        assert list(graph.neighbors(ASSET_A)) == []

    def test_neighbors_in_snapshot_order(self):
        """Neighbors are yielded in pool-list order, from either side."""
        ab = make_pool(ASSET_A, ASSET_B)
        ca = make_pool(ASSET_C, ASSET_A)
        bc = make_pool(ASSET_B, ASSET_C)
        graph = TokenGraph([ab, bc, ca])

        assert list(graph.neighbors(ASSET_A)) == [(ab, ASSET_B), (ca, ASSET_C)]

    def test_neighbors_exclude_visited(self):
        """Visited assets are not offered as destinations."""
        ab = make_pool(ASSET_A, ASSET_B)
        ac = make_pool(ASSET_A, ASSET_C)
        graph = TokenGraph([ab, ac])

        assert list(graph.neighbors(ASSET_A, {ASSET_B})) == [(ac, ASSET_C)]

    def test_parallel_pools_are_separate_edges(self):
        """Two pools for the same pair are both neighbors."""
        first = make_pool(ASSET_A, ASSET_B, address="first")
        second = make_pool(ASSET_A, ASSET_B, address="second")
        graph = TokenGraph([first, second])

        assert [pool.address for pool, _ in graph.neighbors(ASSET_A)] == ["first", "second"]

    def test_unconnected_asset(self):
        graph = TokenGraph([make_pool(ASSET_A, ASSET_B)])
        assert list(graph.neighbors(ASSET_D)) == []

    def test_edge_output_uses_pricing_model(self):
        pool = make_pool(ASSET_A, ASSET_B, reserve_a=1_000_000, reserve_b=2_000_000)
        graph = TokenGraph([pool])
        assert graph.edge_output(pool, ASSET_A, 1000) == 1992
        assert graph.edge_output(pool, ASSET_C, 1000) is None

"""Implicit token graph over a flat pool list.

Assets are nodes and each pool is an undirected edge between its two assets.
No adjacency index is built: the pool list is the edge set and is scanned
linearly for every expansion. Candidate pool lists are bounded by the caller.
"""

from __future__ import annotations

from collections.abc import Container, Iterator, Sequence

from wayfinder.amm.constant_product import ConstantProduct, ConstantProductPool, constant_product


def connected_asset(pool: ConstantProductPool, asset: str) -> str | None:
    """Return the other side of the pool if asset is one of its sides."""
    return pool.connected_asset(asset)


class TokenGraph:
    """Read-only graph view of a pool snapshot.

    Usage:
        graph = TokenGraph(pools)
        for pool, next_asset in graph.neighbors(asset, visited):
            amount = graph.edge_output(pool, asset, amount_in)
    """

    def __init__(
        self,
        pools: Sequence[ConstantProductPool],
        amm: ConstantProduct | None = None,
    ) -> None:
        """Initialize the view.

        Args:
            pools: Pool snapshot; parallel pools between the same pair are
                   separate edges
            amm: Pricing model (default: shared constant-product instance)
        """
        self._pools = pools
        self._amm = amm or constant_product

    @property
    def pool_count(self) -> int:
        """Number of edges in the graph."""
        return len(self._pools)

    def neighbors(
        self,
        asset: str,
        visited: Container[str] = frozenset(),
    ) -> Iterator[tuple[ConstantProductPool, str]]:
        """Yield (pool, next_asset) for every pool touching asset.

        Args:
            asset: Asset to expand from
            visited: Assets to exclude as destinations

        Yields:
            Pools in snapshot order, paired with the asset across each pool
        """
        for pool in self._pools:
            next_asset = connected_asset(pool, asset)
            if next_asset is None or next_asset in visited:
                continue
            yield pool, next_asset

    def edge_output(self, pool: ConstantProductPool, asset: str, amount_in: int) -> int | None:
        """Output amount for traversing pool from asset, or None if unpriceable."""
        return self._amm.quote(pool, asset, amount_in)


__all__ = ["TokenGraph", "connected_asset"]

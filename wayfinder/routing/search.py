"""Best-first route search over the implicit token graph.

The search maximizes the final output amount of a fixed-input swap. The
frontier is a priority queue keyed on (-amount_out, hops): the partial path
with the highest output is expanded first, and among equal outputs the one
with fewer hops. No heuristic is added to the key, so this is a uniform
(Dijkstra-style) best-first search. Every pop of the destination is compared
against the best solution so far and the frontier is drained before
returning.

Pruning:
- Dominance: for every asset only the best (amount_out, hops) seen so far is
  kept; a new path to a known asset is pushed only if it strictly improves
  the output, or ties it with fewer hops. Stale frontier entries are skipped
  when popped.
- Closed set: an asset popped for expansion is never expanded again, and no
  edge leads back into it. Routes are therefore simple in assets.
- Hop budget: paths that already use max_hops pools are not expanded.
"""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import count

import structlog

from wayfinder.amm.constant_product import ConstantProduct, ConstantProductPool
from wayfinder.constants import DEFAULT_MAX_HOPS, MAX_ROUTE_HOPS
from wayfinder.errors import InvalidRoute, NoValidPath
from wayfinder.routing.graph import TokenGraph
from wayfinder.routing.types import RouteResult, SearchPath

logger = structlog.get_logger()

# (-amount_out, hops, insertion sequence, path)
FrontierEntry = tuple[int, int, int, SearchPath]


def clamp_max_hops(max_hops: int) -> int:
    """Clamp a hop budget to [0, MAX_ROUTE_HOPS]."""
    return max(0, min(max_hops, MAX_ROUTE_HOPS))


class RouteSearch:
    """Best-first search for the route with the highest output.

    Usage:
        engine = RouteSearch(pools, max_hops=3)
        result = engine.find_optimal_route(asset_in, asset_out, amount_in)
        result.route       # pool addresses in order
        result.amount_out  # final output amount
    """

    def __init__(
        self,
        pools: Sequence[ConstantProductPool],
        max_hops: int = DEFAULT_MAX_HOPS,
        amm: ConstantProduct | None = None,
    ) -> None:
        """Initialize the engine for one pool snapshot.

        Args:
            pools: Candidate pools; never mutated
            max_hops: Hop budget, clamped to MAX_ROUTE_HOPS
            amm: Pricing model (default: shared constant-product instance)
        """
        self.graph = TokenGraph(pools, amm)
        self.max_hops = clamp_max_hops(max_hops)

    def find_optimal_route(
        self,
        input_asset: str,
        output_asset: str,
        amount_in: int,
    ) -> RouteResult:
        """Find the route maximizing the output amount.

        Args:
            input_asset: Asset to sell
            output_asset: Asset to buy
            amount_in: Exact amount of input_asset to sell

        Returns:
            RouteResult with the pool addresses of the best route and its
            final output amount

        Raises:
            InvalidRoute: If input_asset == output_asset
            NoValidPath: If no route reaches output_asset within max_hops
        """
        if input_asset == output_asset:
            raise InvalidRoute(f"Input and output asset are both {input_asset}")

        logger.debug(
            "route_search_started",
            input_asset=input_asset[-8:],
            output_asset=output_asset[-8:],
            amount_in=amount_in,
            max_hops=self.max_hops,
            pool_count=self.graph.pool_count,
        )

        sequence = count()
        frontier: list[FrontierEntry] = []
        visited: set[str] = set()
        best_routes: dict[str, tuple[int, int]] = {input_asset: (amount_in, 0)}
        best_solution: SearchPath | None = None
        expansions = 0

        start = SearchPath(asset=input_asset, amount_out=amount_in, hops=0, assets=[input_asset])
        heapq.heappush(frontier, (-amount_in, 0, next(sequence), start))

        while frontier:
            _, _, _, current = heapq.heappop(frontier)

            # Skip entries superseded by a better path to the same asset
            best_amount, best_hops = best_routes[current.asset]
            if current.amount_out < best_amount or (
                current.amount_out == best_amount and current.hops > best_hops
            ):
                continue

            if current.asset == output_asset:
                if best_solution is None or current.amount_out > best_solution.amount_out:
                    best_solution = current
                continue

            if current.hops >= self.max_hops:
                continue

            visited.add(current.asset)
            expansions += 1

            for pool, next_asset in self.graph.neighbors(current.asset, visited):
                amount_out = self.graph.edge_output(pool, current.asset, current.amount_out)
                if not amount_out:
                    continue

                next_hops = current.hops + 1
                known = best_routes.get(next_asset)
                if known is not None:
                    known_amount, known_hops = known
                    if amount_out < known_amount or (
                        amount_out == known_amount and next_hops >= known_hops
                    ):
                        continue

                best_routes[next_asset] = (amount_out, next_hops)
                heapq.heappush(
                    frontier,
                    (
                        -amount_out,
                        next_hops,
                        next(sequence),
                        current.extend(pool, next_asset, amount_out),
                    ),
                )

        if best_solution is None:
            logger.debug(
                "no_valid_path",
                input_asset=input_asset[-8:],
                output_asset=output_asset[-8:],
                max_hops=self.max_hops,
                expansions=expansions,
            )
            raise NoValidPath(
                f"No path from {input_asset} to {output_asset} within {self.max_hops} hops"
            )

        logger.debug(
            "route_found",
            hops=best_solution.hops,
            amount_in=amount_in,
            amount_out=best_solution.amount_out,
            expansions=expansions,
        )

        return RouteResult(
            route=tuple(pool.address for pool in best_solution.pools),
            amount_out=best_solution.amount_out,
            assets=tuple(best_solution.assets),
            pools=tuple(best_solution.pools),
        )


def search(
    pools: Sequence[ConstantProductPool],
    input_asset: str,
    output_asset: str,
    amount_in: int,
    max_hops: int = DEFAULT_MAX_HOPS,
) -> RouteResult:
    """Find the best route through pools. See RouteSearch.find_optimal_route."""
    return RouteSearch(pools, max_hops).find_optimal_route(input_asset, output_asset, amount_in)


__all__ = ["RouteSearch", "clamp_max_hops", "search"]

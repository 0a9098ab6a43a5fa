"""Route discovery through constant-product pools.

Module structure:
- types.py: SearchPath, RouteResult, HopQuote and SwapQuote dataclasses
- graph.py: TokenGraph view over a flat pool list
- search.py: RouteSearch best-first search engine
- quote.py: Swap quotes (per-hop breakdown, fees, price impact)
"""

from wayfinder.routing.graph import TokenGraph, connected_asset
from wayfinder.routing.quote import build_swap_quote, price_impact, quote_route
from wayfinder.routing.search import RouteSearch, clamp_max_hops, search
from wayfinder.routing.types import HopQuote, RouteResult, SearchPath, SwapQuote

__all__ = [
    "HopQuote",
    "RouteResult",
    "RouteSearch",
    "SearchPath",
    "SwapQuote",
    "TokenGraph",
    "build_swap_quote",
    "clamp_max_hops",
    "connected_asset",
    "price_impact",
    "quote_route",
    "search",
]

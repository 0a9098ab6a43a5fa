"""Wayfinder - best-route search through constant-product liquidity pools."""

__version__ = "0.1.0"

from wayfinder.amm.constant_product import ConstantProductPool, quote  # noqa: E402
from wayfinder.errors import (  # noqa: E402
    CalculationOverflow,
    InvalidPoolState,
    InvalidRoute,
    MaximumHopsExceeded,
    NoValidPath,
    SlippageExceeded,
    Unauthorized,
    WayfinderError,
)
from wayfinder.lifecycle import (  # noqa: E402
    RouteRecord,
    RouteStatus,
    ensure_min_amount_out,
    execute_route,
    find_route,
    initialize_route,
)
from wayfinder.routing import RouteResult, RouteSearch, SwapQuote, quote_route, search  # noqa: E402

__all__ = [
    "__version__",
    # Pricing
    "ConstantProductPool",
    "quote",
    # Search
    "RouteResult",
    "RouteSearch",
    "SwapQuote",
    "quote_route",
    "search",
    # Lifecycle
    "RouteRecord",
    "RouteStatus",
    "ensure_min_amount_out",
    "execute_route",
    "find_route",
    "initialize_route",
    # Errors
    "CalculationOverflow",
    "InvalidPoolState",
    "InvalidRoute",
    "MaximumHopsExceeded",
    "NoValidPath",
    "SlippageExceeded",
    "Unauthorized",
    "WayfinderError",
]

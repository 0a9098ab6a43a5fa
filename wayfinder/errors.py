"""Error kinds raised by the routing core.

Every error carries a stable ``code`` so that logs and the HTTP layer can
report failures without depending on class names.
"""


class WayfinderError(Exception):
    """Base class for routing errors."""

    code = "wayfinder_error"


class InvalidRoute(WayfinderError):
    """Input and output assets are identical, or the route record is in a
    state that forbids the requested transition."""

    code = "invalid_route"


class NoValidPath(WayfinderError):
    """No path reaches the output asset within the hop budget."""

    code = "no_valid_path"


class CalculationOverflow(WayfinderError, ArithmeticError):
    """An arithmetic step in the pricing model cannot be represented."""

    code = "calculation_overflow"


class MaximumHopsExceeded(WayfinderError):
    """A route is longer than the hop budget of its record."""

    code = "maximum_hops_exceeded"


class SlippageExceeded(WayfinderError):
    """The found output is below the caller's minimum."""

    code = "slippage_exceeded"


class InvalidPoolState(WayfinderError, ValueError):
    """Pool snapshot violates the pool invariants."""

    code = "invalid_pool_state"


class Unauthorized(WayfinderError):
    """Caller is not the owner of the route record."""

    code = "unauthorized"


__all__ = [
    "CalculationOverflow",
    "InvalidPoolState",
    "InvalidRoute",
    "MaximumHopsExceeded",
    "NoValidPath",
    "SlippageExceeded",
    "Unauthorized",
    "WayfinderError",
]

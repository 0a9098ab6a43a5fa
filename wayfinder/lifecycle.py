"""Route record lifecycle.

A RouteRecord tracks one routing request from creation through search to
execution:

    CREATED --find_route--> ROUTE_FOUND --execute_route--> EXECUTED

Status only moves forward. A failed search leaves the record in CREATED; a
found route is never overwritten (searching again requires a new record).
EXECUTED is terminal.

Callers own the record and must serialize lifecycle calls against it: the
status check and the status update of one transition are not atomic.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

import structlog

from wayfinder.amm.constant_product import ConstantProductPool
from wayfinder.constants import DEFAULT_MAX_HOPS, U64_MAX
from wayfinder.errors import (
    InvalidRoute,
    MaximumHopsExceeded,
    SlippageExceeded,
    Unauthorized,
)
from wayfinder.routing.search import RouteSearch, clamp_max_hops
from wayfinder.routing.types import RouteResult

logger = structlog.get_logger()


class RouteStatus(str, Enum):
    """Lifecycle state of a route record."""

    # Also called "initialized": parameters stored, no route yet
    CREATED = "created"
    ROUTE_FOUND = "route_found"
    EXECUTED = "executed"

    @property
    def rank(self) -> int:
        return _STATUS_ORDER.index(self)


_STATUS_ORDER = (RouteStatus.CREATED, RouteStatus.ROUTE_FOUND, RouteStatus.EXECUTED)


@dataclass
class RouteRecord:
    """State of one routing request.

    Use RouteRecord.create (or initialize_route) rather than the constructor
    so that the request parameters are validated.
    """

    input_asset: str
    output_asset: str
    amount_in: int
    min_amount_out: int
    max_hops: int
    owner: str
    hops: int = 0
    route: list[str] = field(default_factory=list)
    amount_out: int = 0
    status: RouteStatus = RouteStatus.CREATED

    @classmethod
    def create(
        cls,
        owner: str,
        input_asset: str,
        output_asset: str,
        amount_in: int,
        min_amount_out: int = 0,
        max_hops: int = DEFAULT_MAX_HOPS,
    ) -> RouteRecord:
        """Create a record in CREATED.

        Args:
            owner: Identity allowed to execute the route
            input_asset: Asset to sell
            output_asset: Asset to buy
            amount_in: Exact amount to sell, > 0
            min_amount_out: Caller's slippage floor
            max_hops: Hop budget, clamped to MAX_ROUTE_HOPS

        Raises:
            InvalidRoute: If input_asset == output_asset
            ValueError: If an amount is out of range or max_hops < 1
        """
        if input_asset == output_asset:
            raise InvalidRoute(f"Input and output asset are both {input_asset}")
        if not 0 < amount_in <= U64_MAX:
            raise ValueError(f"amount_in must be in (0, 2^64-1], got {amount_in}")
        if not 0 <= min_amount_out <= U64_MAX:
            raise ValueError(f"min_amount_out must be in [0, 2^64-1], got {min_amount_out}")
        if max_hops < 1:
            raise ValueError(f"max_hops must be at least 1, got {max_hops}")

        record = cls(
            input_asset=input_asset,
            output_asset=output_asset,
            amount_in=amount_in,
            min_amount_out=min_amount_out,
            max_hops=clamp_max_hops(max_hops),
            owner=owner,
        )
        logger.info(
            "route_initialized",
            input_asset=input_asset[-8:],
            output_asset=output_asset[-8:],
            amount_in=amount_in,
            max_hops=record.max_hops,
        )
        return record

    @property
    def is_terminal(self) -> bool:
        return self.status is RouteStatus.EXECUTED

    def apply_route(self, result: RouteResult) -> None:
        """Store a search result and move to ROUTE_FOUND.

        Raises:
            InvalidRoute: If the record is not in CREATED
            MaximumHopsExceeded: If the route is longer than max_hops
        """
        self.require_status(RouteStatus.CREATED, "store a route")
        if result.hops > self.max_hops:
            raise MaximumHopsExceeded(
                f"Route uses {result.hops} hops, record allows {self.max_hops}"
            )
        self.route = list(result.route)
        self.hops = result.hops
        self.amount_out = result.amount_out
        self._advance(RouteStatus.ROUTE_FOUND)

    def mark_executed(self, signer: str) -> None:
        """Move a found route to EXECUTED on behalf of signer.

        Raises:
            InvalidRoute: If the record is not in ROUTE_FOUND
            Unauthorized: If signer is not the record owner
        """
        self.require_status(RouteStatus.ROUTE_FOUND, "execute")
        if signer != self.owner:
            logger.warning("route_execution_unauthorized", signer=signer[-8:], owner=self.owner[-8:])
            raise Unauthorized("Only the route owner can execute it")
        self._advance(RouteStatus.EXECUTED)

    def require_status(self, expected: RouteStatus, action: str) -> None:
        """Raise InvalidRoute unless the record is in the expected status."""
        if self.status is not expected:
            raise InvalidRoute(
                f"Cannot {action}: route is {self.status.value}, expected {expected.value}"
            )

    def _advance(self, new_status: RouteStatus) -> None:
        if new_status.rank <= self.status.rank:
            raise InvalidRoute(f"Route cannot move from {self.status.value} to {new_status.value}")
        logger.info(
            "route_state_changed",
            from_status=self.status.value,
            to_status=new_status.value,
            hops=self.hops,
        )
        self.status = new_status


def initialize_route(
    owner: str,
    input_asset: str,
    output_asset: str,
    amount_in: int,
    min_amount_out: int = 0,
    max_hops: int = DEFAULT_MAX_HOPS,
) -> RouteRecord:
    """Create a route record in CREATED. See RouteRecord.create."""
    return RouteRecord.create(
        owner=owner,
        input_asset=input_asset,
        output_asset=output_asset,
        amount_in=amount_in,
        min_amount_out=min_amount_out,
        max_hops=max_hops,
    )


def find_route(record: RouteRecord, pools: Sequence[ConstantProductPool]) -> RouteResult:
    """Search pools for the record's best route and store it.

    The record's min_amount_out is not enforced here; see
    ensure_min_amount_out.

    Args:
        record: Record in CREATED
        pools: Pool snapshot to search

    Returns:
        The stored RouteResult

    Raises:
        InvalidRoute: If the record is not in CREATED
        NoValidPath: If no route exists within the record's hop budget
            (the record stays in CREATED)
    """
    record.require_status(RouteStatus.CREATED, "search")
    engine = RouteSearch(pools, record.max_hops)
    result = engine.find_optimal_route(record.input_asset, record.output_asset, record.amount_in)
    record.apply_route(result)
    return result


def ensure_min_amount_out(record: RouteRecord) -> None:
    """Check a found route against the record's slippage floor.

    Raises:
        InvalidRoute: If no route has been found yet
        SlippageExceeded: If amount_out < min_amount_out
    """
    if record.status is RouteStatus.CREATED:
        raise InvalidRoute("Cannot check slippage: no route found yet")
    if record.amount_out < record.min_amount_out:
        raise SlippageExceeded(
            f"Route output {record.amount_out} below minimum {record.min_amount_out}"
        )


def execute_route(record: RouteRecord, signer: str) -> None:
    """Mark a found route as executed by its owner.

    Settlement through the pools happens outside this package.

    Raises:
        InvalidRoute: If the record is not in ROUTE_FOUND
        Unauthorized: If signer is not the record owner
    """
    record.mark_executed(signer)


__all__ = [
    "RouteRecord",
    "RouteStatus",
    "ensure_min_amount_out",
    "execute_route",
    "find_route",
    "initialize_route",
]

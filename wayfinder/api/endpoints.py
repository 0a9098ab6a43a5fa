"""API endpoints for the route quote service."""

import asyncio

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from wayfinder.amm.constant_product import ConstantProductPool, parse_pool_snapshot
from wayfinder.config import SearchConfig
from wayfinder.errors import InvalidRoute, NoValidPath, WayfinderError
from wayfinder.models.quote import ErrorResponse, HopLeg, QuoteRequest, QuoteResponse
from wayfinder.routing.quote import quote_route
from wayfinder.routing.types import SwapQuote

logger = structlog.get_logger()

router = APIRouter()

_config = SearchConfig.from_env()


def get_config() -> SearchConfig:
    """Dependency provider for the search configuration.

    Override this in tests to inject a different configuration:
        app.dependency_overrides[get_config] = lambda: SearchConfig(...)
    """
    return _config


def error_status(err: WayfinderError) -> int:
    """HTTP status for a routing error."""
    if isinstance(err, InvalidRoute):
        return 400
    if isinstance(err, NoValidPath):
        return 404
    return 422


def _error_response(status_code: int, detail: str, code: str) -> JSONResponse:
    body = ErrorResponse(detail=detail, code=code)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _to_response(swap_quote: SwapQuote) -> QuoteResponse:
    return QuoteResponse(
        route=list(swap_quote.route),
        hops=swap_quote.hops,
        amount_in=str(swap_quote.amount_in),
        amount_out=str(swap_quote.amount_out),
        fee=str(swap_quote.fee),
        price_impact=swap_quote.price_impact,
        legs=[
            HopLeg(
                pool=leg.pool,
                asset_in=leg.asset_in,
                asset_out=leg.asset_out,
                amount_in=str(leg.amount_in),
                amount_out=str(leg.amount_out),
                fee=str(leg.fee),
            )
            for leg in swap_quote.legs
        ],
    )


@router.post(
    "/quote",
    response_model=QuoteResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def quote(
    request: QuoteRequest,
    config: SearchConfig = Depends(get_config),
) -> QuoteResponse | JSONResponse:
    """Quote the best route for a swap through the submitted pools.

    Error Handling:
        - Invalid request schema: 422 Validation Error (Pydantic)
        - Too many pools: 413
        - Same input and output asset: 400 (invalid_route)
        - No route within the hop budget: 404 (no_valid_path)
        - Malformed pool snapshots: dropped, the rest are searched
        - Unexpected exception: logged, 500 (internal_error)
    """
    max_hops = request.max_hops or config.default_max_hops
    logger.info(
        "received_quote_request",
        input_asset=request.input_asset[-8:],
        output_asset=request.output_asset[-8:],
        amount_in=request.amount_in,
        max_hops=max_hops,
        pool_count=len(request.pools),
    )

    if len(request.pools) > config.max_candidate_pools:
        logger.warning(
            "too_many_pools",
            pool_count=len(request.pools),
            max_candidate_pools=config.max_candidate_pools,
        )
        return _error_response(
            413,
            f"At most {config.max_candidate_pools} pools per request",
            "too_many_pools",
        )

    pools: list[ConstantProductPool] = []
    for snapshot in request.pools:
        pool = parse_pool_snapshot(snapshot)
        if pool is not None:
            pools.append(pool)

    # The search is CPU-bound; keep it off the event loop
    try:
        loop = asyncio.get_running_loop()
        swap_quote = await loop.run_in_executor(
            None,
            quote_route,
            pools,
            request.input_asset,
            request.output_asset,
            request.amount_in,
            max_hops,
        )
    except WayfinderError as err:
        logger.info("quote_failed", code=err.code, detail=str(err))
        return _error_response(error_status(err), str(err), err.code)
    except Exception:
        logger.exception(
            "quote_error",
            pool_count=len(pools),
            message="Route search raised an exception",
        )
        return _error_response(500, "Internal error", "internal_error")

    logger.info(
        "returning_quote",
        hops=swap_quote.hops,
        amount_out=swap_quote.amount_out,
    )
    return _to_response(swap_quote)

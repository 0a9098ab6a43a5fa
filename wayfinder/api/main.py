"""FastAPI application for the route quote service.

Note: Rate limiting is intentionally not implemented at the application level.
It should be handled at the infrastructure layer (reverse proxy / load balancer).
"""

import logging
import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wayfinder import __version__
from wayfinder.api.endpoints import router

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("WAYFINDER_HOST", "0.0.0.0")
PORT = int(os.environ.get("WAYFINDER_PORT", "8000"))
DEBUG = os.environ.get("WAYFINDER_DEBUG", "false").lower() in ("true", "1", "yes")
LOG_LEVEL = os.environ.get("WAYFINDER_LOG_LEVEL", "INFO").upper()

# Maximum request body size (5 MB)
MAX_REQUEST_SIZE = 5 * 1024 * 1024

app = FastAPI(
    title="Wayfinder",
    description="Best-route quotes through constant-product liquidity pools",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and not content_length.isdigit():
        return JSONResponse(
            status_code=400,
            content={"detail": "Invalid Content-Length header", "code": "invalid_content_length"},
        )
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(
            status_code=413,
            content={"detail": "Request too large", "code": "request_too_large"},
        )
    return await call_next(request)


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure structlog for console output at the given level name."""
    level_no = logging.getLevelName(level)
    if not isinstance(level_no, int):
        level_no = logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
    )


def run() -> None:
    """Run the quote API server.

    Configuration via environment variables:
    - WAYFINDER_HOST: Host to bind to (default: 0.0.0.0)
    - WAYFINDER_PORT: Port to bind to (default: 8000)
    - WAYFINDER_DEBUG: Enable debug/reload mode (default: false)
    - WAYFINDER_LOG_LEVEL: Log level name (default: INFO)
    - WAYFINDER_DEFAULT_MAX_HOPS: Hop budget when a request gives none (default: 3)
    - WAYFINDER_MAX_CANDIDATE_POOLS: Pools accepted per request (default: 1000)
    """
    configure_logging()
    uvicorn.run(
        "wayfinder.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()

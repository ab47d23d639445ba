"""
Request Logging Middleware

One access-log line per request on the ``shortie.http`` logger:

    POST /shorten -> 201 in 0.84ms (client 203.0.113.7)

Server errors are logged at ERROR, client errors at WARNING and the rest at
INFO, so a WARNING-level deployment still sees rejected and failed requests.
The measured duration is echoed back in ``X-Process-Time`` (milliseconds).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("shortie.http")


def client_address(request: Request) -> str:
    """First hop of X-Forwarded-For when behind a proxy, else the peer address."""
    forwarded_for = request.headers.get("x-forwarded-for", "")
    first_hop = forwarded_for.split(",")[0].strip()
    if first_hop:
        return first_hop
    return request.client.host if request.client else "unknown"


def level_for_status(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access logging and timing for every request."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.exception(
                f"{request.method} {request.url.path} -> unhandled error "
                f"after {elapsed_ms:.2f}ms (client {client_address(request)})"
            )
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.log(
            level_for_status(response.status_code),
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"in {elapsed_ms:.2f}ms (client {client_address(request)})",
        )
        response.headers["X-Process-Time"] = f"{elapsed_ms:.3f}"
        return response


def add_logging_middleware(app):
    app.add_middleware(RequestLoggingMiddleware)

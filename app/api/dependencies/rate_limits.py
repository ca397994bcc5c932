from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address


def client_ip(request: Request) -> Optional[str]:
    """Visitor address, preferring the first X-Forwarded-For hop.

    Pages are usually served behind a CDN or load balancer, so the socket
    peer is the proxy, not the visitor.
    """
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    return request.client.host if request.client else None


def visitor_key_func(request: Request) -> str:
    return client_ip(request) or get_remote_address(request)


limiter = Limiter(
    key_func=visitor_key_func,
)


async def rate_limit_handler(_request: Request, exc: Exception):
    """Return 429 with a JSON message when a visitor exceeds a route limit."""
    if isinstance(exc, RateLimitExceeded):
        return JSONResponse(
            status_code=429,
            content={"message": "Rate limit exceeded"},
        )


def setup_rate_limiter(app: FastAPI):
    """
    Setup rate limiting for the FastAPI application.
    """
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter():
    """
    Returns the limiter instance.
    """
    return limiter

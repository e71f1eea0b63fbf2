"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client limit on every route.
Each application instance gets its own limiter, so limits never leak
between apps built in the same process.

The limit is checked by an application-wide dependency rather than by
``SlowAPIMiddleware``: the middleware looks the endpoint up in a flat
``app.routes`` list and lets everything through when routers are nested.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from limits import RateLimitItem, parse
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import Settings

RATE_LIMIT_SCOPE = "default"


class ClientRateLimitExceeded(Exception):
    """Raised when a client has spent its quota for the current window."""

    def __init__(self, limit: RateLimitItem) -> None:
        self.limit = limit
        self.detail = f"{limit} exceeded"
        super().__init__(self.detail)


def build_limiter(settings: Settings) -> Limiter:
    """Create a limiter applying ``settings.rate_limit_default`` per client IP."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def parse_rate_limit(settings: Settings) -> RateLimitItem:
    """Parse a limit string such as ``120/minute``."""
    return parse(settings.rate_limit_default)


def enforce_rate_limit(request: Request) -> None:
    """Count the request against its client's quota.

    Raises:
        ClientRateLimitExceeded: The client has no requests left in the window.
    """
    limiter: Limiter = request.app.state.limiter
    if not limiter.enabled:
        return
    limit: RateLimitItem = request.app.state.rate_limit
    if not limiter.limiter.hit(limit, RATE_LIMIT_SCOPE, get_remote_address(request)):
        raise ClientRateLimitExceeded(limit)


async def rate_limit_exceeded_handler(
    _request: Request, exc: ClientRateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "message": exc.detail},
    )

"""Fixed-window, per-client-IP rate limiting for the /api routes."""
import logging
import math
import time

from limits import RateLimitItem, RateLimitItemPerMinute
from limits.storage import MemoryStorage
from limits.strategies import FixedWindowRateLimiter
from starlette.middleware.base import (BaseHTTPMiddleware,
                                       RequestResponseEndpoint)
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests from this IP. Please try again later."


def per_minutes(max_requests: int, window_minutes: int) -> RateLimitItem:
    """`max_requests` per `window_minutes`-minute window."""
    return RateLimitItemPerMinute(max_requests, window_minutes)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Counts requests per client IP under a path prefix; over the cap gets 429.

    Sends the standard RateLimit-Limit / RateLimit-Remaining / RateLimit-Reset
    headers (plus Retry-After on 429) and no legacy X-RateLimit-* headers.
    Counters live in process memory; hit() and the stats read run without an
    await in between, so each request updates its counter atomically.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        limit: RateLimitItem,
        path_prefix: str = "/api",
        message: str = RATE_LIMIT_MESSAGE,
    ) -> None:
        super().__init__(app)
        self._limit = limit
        self._path_prefix = path_prefix
        self._message = message
        self._limiter = FixedWindowRateLimiter(MemoryStorage())

    def _applies_to(self, request: Request) -> bool:
        path = request.url.path
        return path == self._path_prefix or path.startswith(self._path_prefix + "/")

    def _headers(self, remaining: int, reset_at: float) -> dict[str, str]:
        reset_in = max(0, math.ceil(reset_at - time.time()))
        return {
            "RateLimit-Limit": str(self._limit.amount),
            "RateLimit-Remaining": str(max(0, remaining)),
            "RateLimit-Reset": str(reset_in),
        }

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not self._applies_to(request):
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        allowed = self._limiter.hit(self._limit, client_ip)
        reset_at, remaining = self._limiter.get_window_stats(self._limit, client_ip)
        headers = self._headers(remaining, reset_at)

        if not allowed:
            logger.warning("Rate limit exceeded for %s on %s", client_ip, request.url.path)
            headers["Retry-After"] = headers["RateLimit-Reset"]
            return JSONResponse({"error": self._message}, status_code=429, headers=headers)

        response = await call_next(request)
        response.headers.update(headers)
        return response

"""Rate limiting middleware."""

import falcon.asgi

from collection_service.domain.exceptions import RateLimitExceeded
from collection_service.infrastructure.rate_limit import FixedWindowRateLimiter
from collection_service.interfaces.api.middleware.public_paths import is_public_path
from collection_service.logging import get_logger

logger = get_logger(__name__)


class RateLimitMiddleware:
    """Limits requests per client address within a fixed window."""

    def __init__(self, limiter: FixedWindowRateLimiter) -> None:
        self._limiter = limiter

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        req.context.rate_limit = None
        if req.method == "OPTIONS" or is_public_path(req.path):
            return

        key = f"ip:{req.remote_addr or 'unknown'}"
        decision = self._limiter.hit(key)
        req.context.rate_limit = decision
        if not decision.allowed:
            logger.warning(
                "Rate limit exceeded",
                key=key,
                path=req.path,
                limit=decision.limit,
                retry_after=decision.reset_seconds,
            )
            raise RateLimitExceeded(retry_after=decision.reset_seconds)

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        decision = getattr(req.context, "rate_limit", None)
        if decision is None:
            return
        resp.set_header("RateLimit-Limit", str(decision.limit))
        resp.set_header("RateLimit-Remaining", str(decision.remaining))
        resp.set_header("RateLimit-Reset", str(decision.reset_seconds))

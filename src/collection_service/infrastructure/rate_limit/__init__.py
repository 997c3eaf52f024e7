"""Rate limiting storage."""

from collection_service.infrastructure.rate_limit.storage import (
    FixedWindowRateLimiter,
    RateLimitDecision,
)

__all__ = [
    "FixedWindowRateLimiter",
    "RateLimitDecision",
]

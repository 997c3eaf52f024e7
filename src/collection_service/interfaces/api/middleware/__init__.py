"""HTTP middleware chain."""

from collection_service.interfaces.api.middleware.api_key import APIKeyMiddleware
from collection_service.interfaces.api.middleware.auth import AuthMiddleware, RequestUser
from collection_service.interfaces.api.middleware.client_lifespan import (
    ClientLifespanMiddleware,
)
from collection_service.interfaces.api.middleware.cors import CORSMiddleware
from collection_service.interfaces.api.middleware.rate_limit import RateLimitMiddleware
from collection_service.interfaces.api.middleware.security_headers import (
    SecurityHeadersMiddleware,
)

__all__ = [
    "APIKeyMiddleware",
    "AuthMiddleware",
    "CORSMiddleware",
    "ClientLifespanMiddleware",
    "RateLimitMiddleware",
    "RequestUser",
    "SecurityHeadersMiddleware",
]

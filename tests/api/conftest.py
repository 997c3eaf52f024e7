"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from collection_service.application.use_cases.collection.create_collection import (
    CreateCollectionUseCase,
)
from collection_service.application.use_cases.collection.delete_collection import (
    DeleteCollectionUseCase,
)
from collection_service.application.use_cases.collection.get_collection import (
    GetCollectionUseCase,
)
from collection_service.application.use_cases.collection.list_collections import (
    ListCollectionsUseCase,
)
from collection_service.application.use_cases.collection.update_collection import (
    UpdateCollectionUseCase,
)
from collection_service.infrastructure.rate_limit import FixedWindowRateLimiter
from collection_service.interfaces.api.app import create_app
from collection_service.interfaces.api.middleware import (
    APIKeyMiddleware,
    AuthMiddleware,
    CORSMiddleware,
    RateLimitMiddleware,
    SecurityHeadersMiddleware,
)
from collection_service.interfaces.api.resources import (
    CollectionResource,
    CollectionsResource,
    HealthResource,
)

ALICE_AUTH = {"Authorization": "Bearer token-alice"}
BOB_AUTH = {"Authorization": "Bearer token-bob"}


def build_app(repository, middleware, api_key_enabled=False):
    """Falcon ASGI app over the fake repository with the given middleware."""
    return create_app(
        CollectionsResource(
            ListCollectionsUseCase(repository),
            CreateCollectionUseCase(repository),
        ),
        CollectionResource(
            GetCollectionUseCase(repository),
            UpdateCollectionUseCase(repository),
            DeleteCollectionUseCase(repository),
        ),
        HealthResource(),
        middleware=middleware,
        api_key_enabled=api_key_enabled,
    )


@pytest.fixture
def client(repository, identity_provider) -> TestClient:
    """Client for the authenticated configuration."""
    app = build_app(
        repository,
        [
            SecurityHeadersMiddleware(),
            CORSMiddleware(["*"]),
            AuthMiddleware(identity_provider),
        ],
    )
    return TestClient(app)


@pytest.fixture
def anonymous_client(repository, identity_provider) -> TestClient:
    """Client with token verification disabled - no caller identity is attached."""
    app = build_app(repository, [AuthMiddleware(identity_provider, required=False)])
    return TestClient(app)


@pytest.fixture
def api_key_client(repository, identity_provider) -> TestClient:
    """Client for the service-to-service configuration."""
    app = build_app(
        repository,
        [AuthMiddleware(identity_provider), APIKeyMiddleware("s3cret")],
        api_key_enabled=True,
    )
    return TestClient(app)


@pytest.fixture
def rate_limited_client(repository, identity_provider) -> TestClient:
    """Client allowing two requests per window."""
    limiter = FixedWindowRateLimiter(max_requests=2, window_seconds=60)
    app = build_app(
        repository,
        [RateLimitMiddleware(limiter), AuthMiddleware(identity_provider)],
    )
    return TestClient(app)

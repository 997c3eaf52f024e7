"""Application entry point and composition root."""

import uvicorn
from falcon.asgi import App

from collection_service import __version__
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
from collection_service.config import Settings, get_settings
from collection_service.infrastructure.rate_limit import FixedWindowRateLimiter
from collection_service.infrastructure.supabase import (
    SupabaseAuthProvider,
    SupabaseClient,
    SupabaseCollectionRepository,
)
from collection_service.interfaces.api.app import create_app
from collection_service.interfaces.api.middleware import (
    APIKeyMiddleware,
    AuthMiddleware,
    ClientLifespanMiddleware,
    CORSMiddleware,
    RateLimitMiddleware,
    SecurityHeadersMiddleware,
)
from collection_service.interfaces.api.resources import (
    CollectionResource,
    CollectionsResource,
    HealthResource,
)
from collection_service.logging import configure_logging, get_logger

logger = get_logger(__name__)


def create_collection_app(
    settings: Settings | None = None,
    client: SupabaseClient | None = None,
) -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    client = client or SupabaseClient(
        url=settings.supabase_url,
        anon_key=settings.supabase_anon_key,
        timeout=settings.http_timeout,
    )
    repository = SupabaseCollectionRepository(
        client,
        accounts_table=settings.accounts_table,
        owner_fk_name=settings.owner_fk_name,
    )

    collections_resource = CollectionsResource(
        ListCollectionsUseCase(repository),
        CreateCollectionUseCase(repository),
    )
    collection_resource = CollectionResource(
        GetCollectionUseCase(repository),
        UpdateCollectionUseCase(repository),
        DeleteCollectionUseCase(repository),
    )

    middleware: list[object] = [
        SecurityHeadersMiddleware(hsts=settings.is_production),
        CORSMiddleware(settings.cors_origin_list),
        ClientLifespanMiddleware(client),
    ]
    if settings.rate_limit_enabled:
        middleware.append(
            RateLimitMiddleware(
                FixedWindowRateLimiter(
                    max_requests=settings.rate_limit_max_requests,
                    window_seconds=settings.rate_limit_window_seconds,
                )
            )
        )
    middleware.append(
        AuthMiddleware(SupabaseAuthProvider(client), required=settings.auth_enabled)
    )
    if settings.api_key:
        middleware.append(APIKeyMiddleware(settings.api_key))

    logger.info(
        "Application configured",
        version=__version__,
        environment=settings.environment,
        auth_enabled=settings.auth_enabled,
        api_key_enabled=bool(settings.api_key),
        rate_limit_enabled=settings.rate_limit_enabled,
    )
    return create_app(
        collections_resource,
        collection_resource,
        HealthResource(),
        middleware=middleware,
        api_key_enabled=bool(settings.api_key),
        server_url=settings.public_url or f"http://localhost:{settings.port}",
    )


def main() -> None:
    """CLI entry point - serve the API with uvicorn."""
    settings = get_settings()
    configure_logging(settings)
    app = create_collection_app(settings)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()

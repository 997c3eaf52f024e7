"""Falcon ASGI application."""

from collections.abc import Sequence

import falcon.asgi
from falcon.asgi import App

from collection_service import __version__
from collection_service.interfaces.api.errors import register_error_handlers
from collection_service.interfaces.api.openapi import build_openapi_document
from collection_service.interfaces.api.resources import (
    CollectionResource,
    CollectionsResource,
    DocsResource,
    HealthResource,
)

API_BASE_PATH = "/api/collections"
DOCS_PATH = "/api-docs"


def create_app(
    collections_resource: CollectionsResource,
    collection_resource: CollectionResource,
    health_resource: HealthResource,
    middleware: Sequence[object] = (),
    api_key_enabled: bool = False,
    server_url: str | None = None,
) -> App:
    """Create Falcon ASGI app with routes, error handlers and API docs."""
    app = falcon.asgi.App(middleware=list(middleware))
    app.req_options.strip_url_path_trailing_slash = True
    register_error_handlers(app)

    routes = [
        ("/health", health_resource),
        (API_BASE_PATH, collections_resource),
        (API_BASE_PATH + "/{collection_id}", collection_resource),
    ]
    for path, resource in routes:
        app.add_route(path, resource)

    docs = DocsResource(
        build_openapi_document(
            routes,
            title="Collection Service API",
            version=__version__,
            server_url=server_url,
            api_key_enabled=api_key_enabled,
        ),
        document_url=DOCS_PATH + "/openapi.json",
    )
    app.add_route(DOCS_PATH, docs)
    app.add_route(DOCS_PATH + "/openapi.json", docs, suffix="openapi")
    return app

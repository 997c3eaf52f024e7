"""Collection API resources.

Responder docstrings carry an OpenAPI operation object in YAML after the
``---`` marker; ``interfaces.api.openapi`` assembles them into the served
document.
"""

from typing import Any

import falcon
import falcon.asgi

from collection_service.application.dto import (
    CreateCollectionInput,
    ListCollectionsFilter,
    UpdateCollectionInput,
)
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
from collection_service.domain.exceptions import (
    AuthenticationRequired,
    InvalidIdentifier,
    NotFound,
    ValidationFailed,
)
from collection_service.domain.value_objects import ListScope, is_valid_collection_id
from collection_service.interfaces.api.middleware.public_paths import bearer_token


def _token(req: falcon.asgi.Request) -> str | None:
    return bearer_token(req.get_header("Authorization"))


def _caller_id(req: falcon.asgi.Request) -> str | None:
    user = getattr(req.context, "user", None)
    return user.user_id if user else None


def _require_caller(req: falcon.asgi.Request, action: str) -> str:
    caller_id = _caller_id(req)
    if not caller_id:
        raise AuthenticationRequired(f"Authentication required to {action} collection")
    return caller_id


def _check_id(collection_id: str) -> str:
    if not is_valid_collection_id(collection_id):
        raise InvalidIdentifier()
    return collection_id


async def _read_body(req: falcon.asgi.Request) -> Any:
    try:
        return await req.get_media(default_when_empty={})
    except falcon.MediaMalformedError as e:
        raise ValidationFailed(
            "Invalid JSON body", details=[e.description or "malformed JSON"]
        ) from e


def _parse_list_filters(req: falcon.asgi.Request) -> ListCollectionsFilter:
    errors: list[str] = []

    is_public = None
    raw_public = req.get_param("is_public")
    if raw_public:
        lowered = raw_public.strip().lower()
        if lowered in ("true", "false"):
            is_public = lowered == "true"
        else:
            errors.append("is_public must be 'true' or 'false'")

    scope = None
    raw_scope = req.get_param("filter")
    if raw_scope:
        try:
            scope = ListScope(raw_scope.strip().lower())
        except ValueError:
            errors.append("filter must be one of: all, my, public")

    if errors:
        raise ValidationFailed("Invalid query parameters", details=errors)

    return ListCollectionsFilter(
        is_public=is_public,
        tag=req.get_param("tag") or None,
        scope=scope,
        search=req.get_param("search") or None,
        caller_id=_caller_id(req),
    )


class CollectionsResource:
    """GET/POST /api/collections - list and create collections."""

    def __init__(
        self,
        list_collections: ListCollectionsUseCase,
        create_collection: CreateCollectionUseCase,
    ) -> None:
        self._list = list_collections
        self._create = create_collection

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List collections.
        ---
        summary: Get all collections
        description: >-
          Retrieve collections filtered by visibility, tag, scope and search
          text, newest first.
        tags: [Collections]
        parameters:
          - in: query
            name: is_public
            schema: {type: string, enum: ["true", "false"]}
            description: Filter by public/private status
          - in: query
            name: tag
            schema: {type: string}
            description: Only collections carrying this tag
            example: computer-science
          - in: query
            name: filter
            schema: {type: string, enum: [all, my, public]}
            description: Scope - every collection, only mine, or only public ones
          - in: query
            name: search
            schema: {type: string}
            description: Case-insensitive search in name and description
            example: algorithms
        responses:
          "200":
            description: Matching collections
            content:
              application/json:
                schema:
                  type: object
                  properties:
                    success: {type: boolean, example: true}
                    count: {type: integer, example: 5}
                    filter: {type: string, example: all}
                    collections:
                      type: array
                      items: {$ref: "#/components/schemas/Collection"}
          "400": {$ref: "#/components/responses/ValidationError"}
          "401": {$ref: "#/components/responses/Unauthorized"}
          "500": {$ref: "#/components/responses/ServerError"}
        """
        filters = _parse_list_filters(req)
        result = await self._list.execute(_token(req), filters)
        resp.media = {
            "success": True,
            "count": result.count,
            "filter": result.filter,
            "collections": [c.to_dict() for c in result.collections],
        }
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create collection owned by the caller.
        ---
        summary: Create a new collection
        tags: [Collections]
        security:
          - BearerAuth: []
        requestBody:
          required: true
          content:
            application/json:
              schema: {$ref: "#/components/schemas/CreateCollectionRequest"}
              example:
                name: Data Structures Study Guide
                description: Important resources for DS course
                is_public: false
                tags: [data-structures, computer-science]
                refs: []
        responses:
          "201":
            description: Collection created
            content:
              application/json:
                schema:
                  type: object
                  properties:
                    success: {type: boolean, example: true}
                    message: {type: string, example: Collection created successfully}
                    collection: {$ref: "#/components/schemas/Collection"}
          "400": {$ref: "#/components/responses/ValidationError"}
          "401": {$ref: "#/components/responses/Unauthorized"}
          "500": {$ref: "#/components/responses/ServerError"}
        """
        caller_id = _require_caller(req, "create")
        data = CreateCollectionInput.from_payload(await _read_body(req))
        collection = await self._create.execute(_token(req), data, caller_id)
        resp.media = {
            "success": True,
            "message": "Collection created successfully",
            "collection": collection.to_dict(),
        }
        resp.status = falcon.HTTP_201


class CollectionResource:
    """GET/PUT/DELETE /api/collections/{collection_id}."""

    def __init__(
        self,
        get_collection: GetCollectionUseCase,
        update_collection: UpdateCollectionUseCase,
        delete_collection: DeleteCollectionUseCase,
    ) -> None:
        self._get = get_collection
        self._update = update_collection
        self._delete = delete_collection

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        collection_id: str,
    ) -> None:
        """Get collection by id.
        ---
        summary: Get collection by ID
        tags: [Collections]
        parameters:
          - {$ref: "#/components/parameters/CollectionId"}
        responses:
          "200":
            description: The collection
            content:
              application/json:
                schema:
                  type: object
                  properties:
                    success: {type: boolean, example: true}
                    collection: {$ref: "#/components/schemas/Collection"}
          "400": {$ref: "#/components/responses/InvalidUUID"}
          "404": {$ref: "#/components/responses/NotFound"}
          "500": {$ref: "#/components/responses/ServerError"}
        """
        _check_id(collection_id)
        collection = await self._get.execute(_token(req), collection_id)
        if collection is None:
            raise NotFound()
        resp.media = {"success": True, "collection": collection.to_dict()}
        resp.status = falcon.HTTP_200

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        collection_id: str,
    ) -> None:
        """Partially update a collection. Owner only.
        ---
        summary: Update a collection
        description: Only the fields present in the body are changed.
        tags: [Collections]
        security:
          - BearerAuth: []
        parameters:
          - {$ref: "#/components/parameters/CollectionId"}
        requestBody:
          required: true
          content:
            application/json:
              schema: {$ref: "#/components/schemas/UpdateCollectionRequest"}
        responses:
          "200":
            description: Collection updated
            content:
              application/json:
                schema:
                  type: object
                  properties:
                    success: {type: boolean, example: true}
                    message: {type: string, example: Collection updated successfully}
                    collection: {$ref: "#/components/schemas/Collection"}
          "400": {$ref: "#/components/responses/ValidationError"}
          "401": {$ref: "#/components/responses/Unauthorized"}
          "403": {$ref: "#/components/responses/Forbidden"}
          "404": {$ref: "#/components/responses/NotFound"}
          "500": {$ref: "#/components/responses/ServerError"}
        """
        caller_id = _require_caller(req, "update")
        _check_id(collection_id)
        data = UpdateCollectionInput.from_payload(await _read_body(req))
        collection = await self._update.execute(_token(req), collection_id, data, caller_id)
        resp.media = {
            "success": True,
            "message": "Collection updated successfully",
            "collection": collection.to_dict(),
        }
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        collection_id: str,
    ) -> None:
        """Delete a collection permanently. Owner only.
        ---
        summary: Delete a collection
        tags: [Collections]
        security:
          - BearerAuth: []
        parameters:
          - {$ref: "#/components/parameters/CollectionId"}
        responses:
          "200":
            description: Collection deleted
            content:
              application/json:
                schema:
                  type: object
                  properties:
                    success: {type: boolean, example: true}
                    message: {type: string, example: Collection deleted successfully}
          "400": {$ref: "#/components/responses/InvalidUUID"}
          "401": {$ref: "#/components/responses/Unauthorized"}
          "403": {$ref: "#/components/responses/Forbidden"}
          "404": {$ref: "#/components/responses/NotFound"}
          "500": {$ref: "#/components/responses/ServerError"}
        """
        caller_id = _require_caller(req, "delete")
        _check_id(collection_id)
        await self._delete.execute(_token(req), collection_id, caller_id)
        resp.media = {"success": True, "message": "Collection deleted successfully"}
        resp.status = falcon.HTTP_200

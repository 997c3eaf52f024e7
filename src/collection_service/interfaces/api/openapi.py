"""OpenAPI document assembled from responder docstrings.

A responder documents itself with a YAML operation object placed after a line
holding only ``---``. Responders without that block are left out.
"""

import inspect
from collections.abc import Iterable
from typing import Any

import yaml

HTTP_METHODS = ("get", "post", "put", "patch", "delete")
DOC_SEPARATOR = "---"

COMPONENTS: dict[str, Any] = yaml.safe_load(
    """
schemas:
  Error:
    type: object
    properties:
      error:
        type: object
        properties:
          code: {type: string, example: VALIDATION_ERROR}
          message: {type: string, example: Validation failed}
          details:
            oneOf:
              - type: string
              - type: array
                items: {type: string}
          status: {type: integer, example: 400}
  Owner:
    type: object
    properties:
      id: {type: string, format: uuid}
      student_code: {type: string, example: "520H0001"}
      email: {type: string, format: email}
  Collection:
    type: object
    properties:
      id: {type: string, format: uuid}
      owner_id: {type: string, format: uuid}
      name: {type: string, maxLength: 255, example: My Study Materials}
      description: {type: string, nullable: true}
      is_public: {type: boolean, default: false}
      tags:
        type: array
        items: {type: string}
        example: [computer-science, algorithms]
      refs:
        type: array
        items: {type: string}
        example: [resource-uuid-1]
      created_at: {type: string, format: date-time}
      owner: {$ref: "#/components/schemas/Owner"}
  CreateCollectionRequest:
    type: object
    required: [name]
    properties:
      name: {type: string, maxLength: 255}
      description: {type: string, nullable: true}
      is_public: {type: boolean, default: false}
      tags: {type: array, items: {type: string}}
      refs: {type: array, items: {type: string}}
  UpdateCollectionRequest:
    type: object
    properties:
      name: {type: string, maxLength: 255}
      description: {type: string, nullable: true}
      is_public: {type: boolean}
      tags: {type: array, items: {type: string}}
      refs: {type: array, items: {type: string}}
parameters:
  CollectionId:
    in: path
    name: collection_id
    required: true
    schema: {type: string, format: uuid}
    example: "550e8400-e29b-41d4-a716-446655440000"
responses:
  ValidationError:
    description: Validation failed
    content:
      application/json:
        schema: {$ref: "#/components/schemas/Error"}
  InvalidUUID:
    description: Invalid collection ID format
    content:
      application/json:
        schema: {$ref: "#/components/schemas/Error"}
  Unauthorized:
    description: Authentication required
    content:
      application/json:
        schema: {$ref: "#/components/schemas/Error"}
  Forbidden:
    description: Caller does not own the collection
    content:
      application/json:
        schema: {$ref: "#/components/schemas/Error"}
  NotFound:
    description: Collection not found
    content:
      application/json:
        schema: {$ref: "#/components/schemas/Error"}
  ServerError:
    description: Internal server error
    content:
      application/json:
        schema: {$ref: "#/components/schemas/Error"}
securitySchemes:
  BearerAuth:
    type: http
    scheme: bearer
    bearerFormat: JWT
    description: Supabase access token
  ApiKeyAuth:
    type: apiKey
    in: header
    name: x-api-key
    description: API key for service-to-service calls
"""
)


def operation_from_docstring(responder: Any) -> dict[str, Any] | None:
    """Parse the YAML block of a responder docstring into an operation object."""
    doc = inspect.getdoc(responder)
    if not doc:
        return None
    lines = doc.splitlines()
    try:
        sep = lines.index(DOC_SEPARATOR)
    except ValueError:
        return None

    operation = yaml.safe_load("\n".join(lines[sep + 1 :])) or {}
    summary = " ".join(line.strip() for line in lines[:sep] if line.strip())
    if summary:
        operation.setdefault("summary", summary)
    return operation


def build_openapi_document(
    routes: Iterable[tuple[str, Any]],
    *,
    title: str,
    version: str,
    server_url: str | None = None,
    api_key_enabled: bool = False,
) -> dict[str, Any]:
    """Build an OpenAPI 3.0 document for ``(path, resource)`` pairs."""
    paths: dict[str, dict[str, Any]] = {}
    for path, resource in routes:
        for method in HTTP_METHODS:
            responder = getattr(resource, f"on_{method}", None)
            if responder is None:
                continue
            operation = operation_from_docstring(responder)
            if operation is not None:
                paths.setdefault(path, {})[method] = operation

    security: dict[str, list] = {"BearerAuth": []}
    if api_key_enabled:
        security["ApiKeyAuth"] = []

    document: dict[str, Any] = {
        "openapi": "3.0.3",
        "info": {
            "title": title,
            "version": version,
            "description": "Collection microservice API documentation",
        },
        "paths": paths,
        "components": COMPONENTS,
        "security": [security],
        "tags": [
            {
                "name": "Collections",
                "description": "Organize resources into named, taggable collections",
            },
        ],
    }
    if server_url:
        document["servers"] = [{"url": server_url}]
    return document

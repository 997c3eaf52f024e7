"""HTTP resources."""

from collection_service.interfaces.api.resources.collections import (
    CollectionResource,
    CollectionsResource,
)
from collection_service.interfaces.api.resources.docs import DocsResource
from collection_service.interfaces.api.resources.health import HealthResource

__all__ = [
    "CollectionResource",
    "CollectionsResource",
    "DocsResource",
    "HealthResource",
]

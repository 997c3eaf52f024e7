"""Application DTOs."""

from collection_service.application.dto.collection_dto import (
    CollectionListResult,
    CollectionQuery,
    CreateCollectionInput,
    ListCollectionsFilter,
    UpdateCollectionInput,
)

__all__ = [
    "CollectionListResult",
    "CollectionQuery",
    "CreateCollectionInput",
    "ListCollectionsFilter",
    "UpdateCollectionInput",
]

"""Repository ports."""

from collection_service.application.ports.repositories.collection_repository import (
    CollectionRepository,
)

__all__ = [
    "CollectionRepository",
]

"""Domain entities."""

from collection_service.domain.entities.collection import Collection, OwnerSummary

__all__ = [
    "Collection",
    "OwnerSummary",
]

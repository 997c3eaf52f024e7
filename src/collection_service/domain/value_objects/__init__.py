"""Domain value objects."""

from collection_service.domain.value_objects.collection_id import (
    UUID_PATTERN,
    is_valid_collection_id,
)
from collection_service.domain.value_objects.list_scope import ListScope

__all__ = [
    "ListScope",
    "UUID_PATTERN",
    "is_valid_collection_id",
]

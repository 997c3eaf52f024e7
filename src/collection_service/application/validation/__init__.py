"""Payload validators."""

from collection_service.application.validation.collection_validator import (
    NAME_MAX_LENGTH,
    validate_create_collection,
    validate_update_collection,
)

__all__ = [
    "NAME_MAX_LENGTH",
    "validate_create_collection",
    "validate_update_collection",
]

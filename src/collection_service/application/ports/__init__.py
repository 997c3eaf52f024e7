"""Application ports - interfaces for external adapters."""

from collection_service.application.ports.identity_provider import (
    AuthenticatedUser,
    IdentityProvider,
)
from collection_service.application.ports.repositories import CollectionRepository

__all__ = [
    "AuthenticatedUser",
    "CollectionRepository",
    "IdentityProvider",
]

"""Supabase adapters."""

from collection_service.infrastructure.supabase.auth_provider import SupabaseAuthProvider
from collection_service.infrastructure.supabase.client import SupabaseClient
from collection_service.infrastructure.supabase.collection_repository import (
    SupabaseCollectionRepository,
)

__all__ = [
    "SupabaseAuthProvider",
    "SupabaseClient",
    "SupabaseCollectionRepository",
]

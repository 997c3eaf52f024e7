"""Collection repository port."""

from typing import Any, Protocol

from collection_service.application.dto import CollectionQuery
from collection_service.domain.entities import Collection


class CollectionRepository(Protocol):
    """Port for collection persistence.

    Every call carries the caller's bearer token so that row-level policies in
    the store are evaluated as the calling identity.
    """

    async def list(self, token: str | None, query: CollectionQuery) -> list[Collection]: ...

    async def get_by_id(self, token: str | None, collection_id: str) -> Collection | None: ...

    async def create(self, token: str | None, row: dict[str, Any]) -> Collection: ...

    async def update(
        self,
        token: str | None,
        collection_id: str,
        changes: dict[str, Any],
        *,
        owner_id: str,
    ) -> Collection | None: ...

    async def delete(self, token: str | None, collection_id: str, *, owner_id: str) -> bool: ...

"""Update collection use case."""

from collection_service.application.dto import UpdateCollectionInput
from collection_service.application.ports import CollectionRepository
from collection_service.domain.entities import Collection
from collection_service.domain.exceptions import (
    AuthenticationRequired,
    Forbidden,
    NotFound,
)
from collection_service.logging import get_logger

logger = get_logger(__name__)


class UpdateCollectionUseCase:
    """Partially update a collection. Only the owner may update."""

    def __init__(self, repository: CollectionRepository) -> None:
        self._repository = repository

    async def execute(
        self,
        token: str | None,
        collection_id: str,
        data: UpdateCollectionInput,
        caller_id: str | None,
    ) -> Collection:
        """Apply the present fields and return the updated collection."""
        if not caller_id:
            raise AuthenticationRequired("Authentication required to update collection")

        existing = await self._repository.get_by_id(token, collection_id)
        if existing is None:
            raise NotFound()
        if existing.owner_id != caller_id:
            raise Forbidden("You do not have permission to update this collection")

        if data.is_empty():
            return existing

        # Mutation is keyed on owner_id too; no row means it changed under us
        updated = await self._repository.update(
            token, collection_id, data.changes(), owner_id=caller_id
        )
        if updated is None:
            raise NotFound()
        logger.info(
            "Collection updated",
            collection_id=collection_id,
            fields=sorted(data.changes()),
        )
        return updated

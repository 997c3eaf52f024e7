"""Delete collection use case."""

from collection_service.application.ports import CollectionRepository
from collection_service.domain.exceptions import (
    AuthenticationRequired,
    Forbidden,
    NotFound,
)
from collection_service.logging import get_logger

logger = get_logger(__name__)


class DeleteCollectionUseCase:
    """Permanently delete a collection. Only the owner may delete."""

    def __init__(self, repository: CollectionRepository) -> None:
        self._repository = repository

    async def execute(
        self, token: str | None, collection_id: str, caller_id: str | None
    ) -> bool:
        if not caller_id:
            raise AuthenticationRequired("Authentication required to delete collection")

        existing = await self._repository.get_by_id(token, collection_id)
        if existing is None:
            raise NotFound()
        if existing.owner_id != caller_id:
            raise Forbidden("You do not have permission to delete this collection")

        deleted = await self._repository.delete(token, collection_id, owner_id=caller_id)
        if not deleted:
            raise NotFound()
        logger.info("Collection deleted", collection_id=collection_id, owner_id=caller_id)
        return True

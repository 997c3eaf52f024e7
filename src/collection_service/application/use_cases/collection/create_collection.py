"""Create collection use case."""

from collection_service.application.dto import CreateCollectionInput
from collection_service.application.ports import CollectionRepository
from collection_service.domain.entities import Collection
from collection_service.domain.exceptions import AuthenticationRequired
from collection_service.logging import get_logger

logger = get_logger(__name__)


class CreateCollectionUseCase:
    """Create a collection owned by the caller."""

    def __init__(self, repository: CollectionRepository) -> None:
        self._repository = repository

    async def execute(
        self,
        token: str | None,
        data: CreateCollectionInput,
        caller_id: str | None,
    ) -> Collection:
        """Persist the collection with owner = caller and return the stored row."""
        if not caller_id:
            raise AuthenticationRequired("Authentication required to create collection")

        collection = await self._repository.create(token, data.to_row(caller_id))
        logger.info("Collection created", collection_id=collection.id, owner_id=caller_id)
        return collection

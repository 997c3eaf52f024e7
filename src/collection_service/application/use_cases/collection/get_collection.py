"""Get collection use case."""

from collection_service.application.ports import CollectionRepository
from collection_service.domain.entities import Collection


class GetCollectionUseCase:
    """Fetch one collection with its owner summary."""

    def __init__(self, repository: CollectionRepository) -> None:
        self._repository = repository

    async def execute(self, token: str | None, collection_id: str) -> Collection | None:
        """Return the collection, or None if no row matches."""
        return await self._repository.get_by_id(token, collection_id)

"""List collections use case."""

from collection_service.application.dto import (
    CollectionListResult,
    CollectionQuery,
    ListCollectionsFilter,
)
from collection_service.application.ports import CollectionRepository
from collection_service.domain.exceptions import AuthenticationRequired
from collection_service.domain.value_objects import ListScope


class ListCollectionsUseCase:
    """List collections by scope, visibility, tag and search text, newest first."""

    def __init__(self, repository: CollectionRepository) -> None:
        self._repository = repository

    async def execute(
        self, token: str | None, filters: ListCollectionsFilter
    ) -> CollectionListResult:
        """Run the list query. Scope ``my`` requires a caller identity."""
        scope = filters.scope or ListScope.ALL
        query = CollectionQuery(
            is_public=filters.is_public,
            tag=filters.tag or None,
            search=filters.search or None,
        )
        if scope is ListScope.MY:
            if not filters.caller_id:
                raise AuthenticationRequired(
                    "Authentication required to view your collections"
                )
            query.owner_id = filters.caller_id
        elif scope is ListScope.PUBLIC:
            query.public_only = True

        collections = await self._repository.list(token, query)
        return CollectionListResult(
            collections=collections,
            count=len(collections),
            filter=scope.value,
        )

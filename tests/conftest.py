"""Pytest fixtures for collection service tests."""

from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import uuid4

import pytest

from collection_service.application.dto import CollectionQuery
from collection_service.application.ports import AuthenticatedUser
from collection_service.domain.entities import Collection, OwnerSummary

ALICE = "11111111-1111-4111-8111-111111111111"
BOB = "22222222-2222-4222-8222-222222222222"


# --- Fake adapters ---


class FakeCollectionRepository:
    """In-memory collection repository mirroring the store's filter semantics."""

    def __init__(self) -> None:
        self._by_id: dict[str, Collection] = {}
        self._clock = datetime(2024, 1, 1, tzinfo=UTC)
        self.tokens: list[str | None] = []
        self.calls: list[str] = []

    def _next_timestamp(self) -> datetime:
        self._clock += timedelta(minutes=1)
        return self._clock

    def add(self, owner_id: str = ALICE, **fields: Any) -> Collection:
        """Helper to seed a stored collection (for tests)."""
        row = {"name": "Seeded", **fields, "owner_id": owner_id}
        return self._insert(row)

    def _insert(self, row: dict[str, Any]) -> Collection:
        collection = Collection(
            id=str(uuid4()),
            owner_id=row["owner_id"],
            name=row["name"],
            description=row.get("description"),
            is_public=row.get("is_public", False),
            tags=list(row.get("tags") or []),
            refs=list(row.get("refs") or []),
            created_at=self._next_timestamp(),
            owner=OwnerSummary(id=row["owner_id"], student_code="520H0001", email=None),
        )
        self._by_id[collection.id] = collection
        return collection

    async def list(self, token: str | None, query: CollectionQuery) -> list[Collection]:
        self.tokens.append(token)
        self.calls.append("list")
        items = list(self._by_id.values())
        if query.owner_id:
            items = [c for c in items if c.owner_id == query.owner_id]
        if query.public_only:
            items = [c for c in items if c.is_public]
        if query.is_public is not None:
            items = [c for c in items if c.is_public == query.is_public]
        if query.tag:
            items = [c for c in items if query.tag in c.tags]
        if query.search:
            needle = query.search.lower()
            items = [
                c
                for c in items
                if needle in c.name.lower() or needle in (c.description or "").lower()
            ]
        items.sort(key=lambda c: c.created_at, reverse=True)
        return items

    async def get_by_id(self, token: str | None, collection_id: str) -> Collection | None:
        self.tokens.append(token)
        self.calls.append("get_by_id")
        return self._by_id.get(collection_id)

    async def create(self, token: str | None, row: dict[str, Any]) -> Collection:
        self.tokens.append(token)
        self.calls.append("create")
        return self._insert(row)

    async def update(
        self,
        token: str | None,
        collection_id: str,
        changes: dict[str, Any],
        *,
        owner_id: str,
    ) -> Collection | None:
        self.tokens.append(token)
        self.calls.append("update")
        existing = self._by_id.get(collection_id)
        if existing is None or existing.owner_id != owner_id:
            return None
        updated = replace(existing, **changes)
        self._by_id[collection_id] = updated
        return updated

    async def delete(self, token: str | None, collection_id: str, *, owner_id: str) -> bool:
        self.tokens.append(token)
        self.calls.append("delete")
        existing = self._by_id.get(collection_id)
        if existing is None or existing.owner_id != owner_id:
            return False
        del self._by_id[collection_id]
        return True


class FakeIdentityProvider:
    """Accepts a fixed set of tokens."""

    def __init__(self, users: dict[str, AuthenticatedUser] | None = None) -> None:
        self._users = users or {}
        self.verified: list[str] = []

    async def verify_token(self, token: str) -> AuthenticatedUser | None:
        self.verified.append(token)
        return self._users.get(token)


# --- Fixtures ---


@pytest.fixture
def repository() -> FakeCollectionRepository:
    """Fresh in-memory repository for each test."""
    return FakeCollectionRepository()


@pytest.fixture
def identity_provider() -> FakeIdentityProvider:
    """Identity provider knowing alice and bob."""
    return FakeIdentityProvider(
        {
            "token-alice": AuthenticatedUser(user_id=ALICE, email="alice@example.com"),
            "token-bob": AuthenticatedUser(user_id=BOB, email="bob@example.com"),
        }
    )

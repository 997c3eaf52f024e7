"""Collection DTOs."""

from dataclasses import dataclass, field
from typing import Any

from collection_service.application.validation import (
    validate_create_collection,
    validate_update_collection,
)
from collection_service.domain.entities import Collection
from collection_service.domain.exceptions import ValidationFailed
from collection_service.domain.value_objects import ListScope

_UPDATABLE_FIELDS = ("name", "description", "is_public", "tags", "refs")


def _clean_description(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


@dataclass
class CreateCollectionInput:
    """Input for creating a collection."""

    name: str
    description: str | None = None
    is_public: bool = False
    tags: list[str] = field(default_factory=list)
    refs: list[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, data: Any) -> "CreateCollectionInput":
        """Validate a request body and normalize it. Raises ValidationFailed."""
        errors = validate_create_collection(data)
        if errors:
            raise ValidationFailed(details=errors)
        return cls(
            name=data["name"].strip(),
            description=_clean_description(data.get("description")),
            is_public=data.get("is_public", False),
            tags=list(data.get("tags") or []),
            refs=list(data.get("refs") or []),
        )

    def to_row(self, owner_id: str) -> dict[str, Any]:
        return {
            "owner_id": owner_id,
            "name": self.name,
            "description": self.description,
            "is_public": self.is_public,
            "tags": self.tags,
            "refs": self.refs,
        }


@dataclass
class UpdateCollectionInput:
    """Partial update - only fields present in the request are applied."""

    fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data: Any) -> "UpdateCollectionInput":
        """Validate a request body and keep the recognised fields present in it."""
        errors = validate_update_collection(data)
        if errors:
            raise ValidationFailed(details=errors)
        fields: dict[str, Any] = {}
        for key in _UPDATABLE_FIELDS:
            if key not in data:
                continue
            value = data[key]
            if key == "name":
                value = value.strip()
            elif key == "description":
                value = _clean_description(value)
            elif key in ("tags", "refs"):
                value = list(value)
            fields[key] = value
        return cls(fields=fields)

    def changes(self) -> dict[str, Any]:
        return dict(self.fields)

    def is_empty(self) -> bool:
        return not self.fields


@dataclass
class ListCollectionsFilter:
    """List query as received from the caller."""

    is_public: bool | None = None
    tag: str | None = None
    scope: ListScope | None = None
    search: str | None = None
    caller_id: str | None = None


@dataclass
class CollectionQuery:
    """Store-level list query; every set condition must hold."""

    owner_id: str | None = None
    public_only: bool = False
    is_public: bool | None = None
    tag: str | None = None
    search: str | None = None


@dataclass
class CollectionListResult:
    """Output of the list use case."""

    collections: list[Collection]
    count: int
    filter: str

"""Collection entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class OwnerSummary:
    """Owner account fields joined at read time; never written by this service."""

    id: str
    student_code: str | None = None
    email: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any] | None) -> "OwnerSummary | None":
        if not row:
            return None
        return cls(
            id=str(row.get("id", "")),
            student_code=row.get("student_code"),
            email=row.get("email"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "student_code": self.student_code, "email": self.email}


@dataclass
class Collection:
    """Collection - a named, taggable set of references owned by one account."""

    id: str
    owner_id: str
    name: str
    description: str | None = None
    is_public: bool = False
    tags: list[str] = field(default_factory=list)
    refs: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    owner: OwnerSummary | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Collection":
        """Normalize a store row; missing flags and arrays take their defaults."""
        return cls(
            id=str(row["id"]),
            owner_id=str(row["owner_id"]),
            name=row["name"],
            description=row.get("description"),
            is_public=bool(row.get("is_public") or False),
            tags=list(row.get("tags") or []),
            refs=list(row.get("refs") or []),
            created_at=_parse_timestamp(row.get("created_at")),
            owner=OwnerSummary.from_row(row.get("owner")),
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON representation returned by the API."""
        return {
            "id": self.id,
            "owner_id": self.owner_id,
            "name": self.name,
            "description": self.description,
            "is_public": self.is_public,
            "tags": list(self.tags),
            "refs": list(self.refs),
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "owner": self.owner.to_dict() if self.owner else None,
        }


def _parse_timestamp(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    # PostgREST may emit a trailing Z
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))

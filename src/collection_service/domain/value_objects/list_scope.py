"""List scope for collection queries."""

from enum import StrEnum


class ListScope(StrEnum):
    """Which collections a list query covers."""

    ALL = "all"
    MY = "my"
    PUBLIC = "public"

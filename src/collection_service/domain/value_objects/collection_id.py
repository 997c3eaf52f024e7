"""Collection identifier format."""

import re

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_valid_collection_id(value: object) -> bool:
    """True if value is a UUID in canonical 8-4-4-4-12 textual form."""
    return isinstance(value, str) and UUID_PATTERN.fullmatch(value) is not None

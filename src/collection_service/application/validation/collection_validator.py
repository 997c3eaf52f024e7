"""Field-level validation for collection payloads.

Both validators are pure: they return the list of violation messages in field
order (name, description, is_public, tags, refs), array elements in index
order. An empty list means the payload is valid.
"""

from typing import Any

NAME_MAX_LENGTH = 255


def validate_create_collection(data: Any) -> list[str]:
    """Validate a create payload. ``name`` is required."""
    if not isinstance(data, dict):
        return ["request body must be a JSON object"]

    errors: list[str] = []
    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        errors.append("name is required and must be a non-empty string")
    elif len(name) > NAME_MAX_LENGTH:
        errors.append(f"name must not exceed {NAME_MAX_LENGTH} characters")

    errors.extend(_validate_optional_fields(data))
    return errors


def validate_update_collection(data: Any) -> list[str]:
    """Validate an update payload. Every field is optional."""
    if not isinstance(data, dict):
        return ["request body must be a JSON object"]

    errors: list[str] = []
    if "name" in data:
        name = data["name"]
        if not isinstance(name, str) or not name.strip():
            errors.append("name must be a non-empty string")
        elif len(name) > NAME_MAX_LENGTH:
            errors.append(f"name must not exceed {NAME_MAX_LENGTH} characters")

    errors.extend(_validate_optional_fields(data))
    return errors


def _validate_optional_fields(data: dict[str, Any]) -> list[str]:
    errors: list[str] = []

    description = data.get("description")
    if description is not None and not isinstance(description, str):
        errors.append("description must be a string")

    if "is_public" in data and not isinstance(data["is_public"], bool):
        errors.append("is_public must be a boolean")

    for key in ("tags", "refs"):
        if key in data:
            errors.extend(_validate_string_list(key, data[key]))
    return errors


def _validate_string_list(key: str, value: Any) -> list[str]:
    if not isinstance(value, list):
        return [f"{key} must be an array"]
    errors = []
    for idx, item in enumerate(value):
        if not isinstance(item, str):
            errors.append(f"{key}[{idx}] must be a string")
        elif not item.strip():
            errors.append(f"{key}[{idx}] cannot be empty")
    return errors

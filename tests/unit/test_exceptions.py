"""Unit tests for domain exceptions."""

import pytest

from collection_service.domain.exceptions import (
    AuthenticationRequired,
    CollectionServiceError,
    Forbidden,
    InvalidIdentifier,
    NotFound,
    RateLimitExceeded,
    UpstreamFailure,
    ValidationFailed,
)


@pytest.mark.parametrize(
    ("exc", "code", "status"),
    [
        (AuthenticationRequired, "AUTHENTICATION_REQUIRED", 401),
        (InvalidIdentifier, "INVALID_UUID", 400),
        (ValidationFailed, "VALIDATION_ERROR", 400),
        (NotFound, "COLLECTION_NOT_FOUND", 404),
        (Forbidden, "FORBIDDEN", 403),
        (UpstreamFailure, "UPSTREAM_ERROR", 500),
    ],
)
def test_codes_and_statuses(exc, code, status) -> None:
    """Each failure kind maps to its own code and status."""
    err = exc()
    assert issubclass(exc, CollectionServiceError)
    assert err.code == code
    assert err.status == status


def test_envelope_includes_details_when_present() -> None:
    err = ValidationFailed(details=["name is required and must be a non-empty string"])
    assert err.to_dict() == {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Validation failed",
            "details": ["name is required and must be a non-empty string"],
            "status": 400,
        }
    }


def test_envelope_omits_missing_details() -> None:
    assert "details" not in NotFound().to_dict()["error"]


def test_status_override_is_per_instance() -> None:
    err = UpstreamFailure("Failed to fetch collections: bad filter", status=400)
    assert err.status == 400
    assert UpstreamFailure().status == 500


def test_exception_message_preserved() -> None:
    msg = "You do not have permission to update this collection"
    with pytest.raises(Forbidden, match=msg):
        raise Forbidden(msg)


def test_rate_limit_carries_retry_after() -> None:
    err = RateLimitExceeded(retry_after=30)
    assert err.retry_after == 30
    assert err.status == 429

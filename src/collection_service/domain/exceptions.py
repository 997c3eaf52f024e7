"""Domain exceptions.

Every failure the HTTP layer knows how to render carries its error code and
status, so the boundary maps them by type instead of by message.
"""


class CollectionServiceError(Exception):
    """Base exception for the collection service."""

    code = "INTERNAL_ERROR"
    status = 500
    default_message = "Internal Server Error"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: list[str] | str | None = None,
        status: int | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.details = details
        if status is not None:
            self.status = status
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Error envelope body."""
        error: dict = {"code": self.code, "message": self.message}
        if self.details is not None:
            error["details"] = self.details
        error["status"] = self.status
        return {"error": error}


class AuthenticationRequired(CollectionServiceError):
    """Caller identity is required but absent."""

    code = "AUTHENTICATION_REQUIRED"
    status = 401
    default_message = "Authentication required"


class InvalidToken(CollectionServiceError):
    """Bearer token was rejected by the identity provider."""

    code = "INVALID_TOKEN"
    status = 401
    default_message = "Invalid or expired token"


class APIKeyRequired(CollectionServiceError):
    code = "API_KEY_REQUIRED"
    status = 401
    default_message = "API key is required"


class InvalidAPIKey(CollectionServiceError):
    code = "INVALID_API_KEY"
    status = 403
    default_message = "Invalid API key"


class InvalidIdentifier(CollectionServiceError):
    """Identifier is not a canonical UUID."""

    code = "INVALID_UUID"
    status = 400
    default_message = "Invalid collection ID format"


class ValidationFailed(CollectionServiceError):
    """Input failed validation; details lists every violation."""

    code = "VALIDATION_ERROR"
    status = 400
    default_message = "Validation failed"


class NotFound(CollectionServiceError):
    """Requested collection was not found."""

    code = "COLLECTION_NOT_FOUND"
    status = 404
    default_message = "Collection not found"


class Forbidden(CollectionServiceError):
    """Caller is not allowed to mutate the collection."""

    code = "FORBIDDEN"
    status = 403
    default_message = "You do not have permission to modify this collection"


class RateLimitExceeded(CollectionServiceError):
    code = "RATE_LIMIT_EXCEEDED"
    status = 429
    default_message = "Too many requests, please try again later"

    def __init__(self, retry_after: int, message: str | None = None) -> None:
        self.retry_after = retry_after
        super().__init__(message)


class UpstreamFailure(CollectionServiceError):
    """The external store returned an error or could not be reached."""

    code = "UPSTREAM_ERROR"
    status = 500
    default_message = "Upstream store request failed"

"""Auth middleware - verifies the bearer token and sets req.context.user."""

from dataclasses import dataclass

import falcon.asgi

from collection_service.application.ports import IdentityProvider
from collection_service.domain.exceptions import AuthenticationRequired, InvalidToken
from collection_service.interfaces.api.middleware.public_paths import (
    bearer_token,
    is_public_path,
)
from collection_service.logging import get_logger

logger = get_logger(__name__)


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str
    email: str | None = None


class AuthMiddleware:
    """Middleware that delegates token verification to the identity provider.

    With ``required=False`` no verification happens and no caller identity is
    attached; resources still forward any bearer token to the store.
    """

    def __init__(self, identity_provider: IdentityProvider, required: bool = True) -> None:
        self._identity = identity_provider
        self._required = required

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Reject unauthenticated requests before routing."""
        req.context.user = None
        if not self._required or req.method == "OPTIONS" or is_public_path(req.path):
            return

        token = bearer_token(req.get_header("Authorization"))
        if not token:
            raise AuthenticationRequired("Authorization token is required")

        user = await self._identity.verify_token(token)
        if user is None:
            logger.warning("Rejected bearer token", path=req.path, remote_addr=req.remote_addr)
            raise InvalidToken()

        req.context.user = RequestUser(user_id=user.user_id, email=user.email)

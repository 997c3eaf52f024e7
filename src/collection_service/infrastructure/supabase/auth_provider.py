"""Supabase (GoTrue) identity provider for bearer token verification."""

import httpx

from collection_service.application.ports import AuthenticatedUser
from collection_service.infrastructure.supabase.client import SupabaseClient
from collection_service.logging import get_logger

logger = get_logger(__name__)

USER_PATH = "/auth/v1/user"


class SupabaseAuthProvider:
    """Validates access tokens by asking Supabase Auth who they belong to."""

    def __init__(self, client: SupabaseClient) -> None:
        self._client = client

    async def verify_token(self, token: str) -> AuthenticatedUser | None:
        """Return the token's user, or None if the token is not accepted."""
        try:
            resp = await self._client.http.get(USER_PATH, headers=self._client.headers(token))
        except httpx.HTTPError as e:
            logger.warning("Token verification request failed", error=str(e))
            return None

        if resp.status_code != 200:
            logger.info("Token rejected by identity provider", status=resp.status_code)
            return None

        try:
            user = resp.json()
        except ValueError:
            logger.warning("Identity provider returned a non-JSON body")
            return None
        if not isinstance(user, dict) or not user.get("id"):
            return None
        return AuthenticatedUser(user_id=str(user["id"]), email=user.get("email"))

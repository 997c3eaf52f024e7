"""Identity provider port - bearer token verification."""

from dataclasses import dataclass
from typing import Protocol


@dataclass
class AuthenticatedUser:
    """Identity resolved from a verified token."""

    user_id: str
    email: str | None = None


class IdentityProvider(Protocol):
    """Port for verifying bearer tokens against the external identity service."""

    async def verify_token(self, token: str) -> AuthenticatedUser | None: ...

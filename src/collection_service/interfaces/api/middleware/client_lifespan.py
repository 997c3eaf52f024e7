"""Client lifespan middleware - closes the Supabase HTTP client on shutdown."""

from typing import Any

from collection_service.infrastructure.supabase import SupabaseClient
from collection_service.logging import get_logger

logger = get_logger(__name__)


class ClientLifespanMiddleware:
    """Middleware tying the shared HTTP client to the ASGI lifespan."""

    def __init__(self, client: SupabaseClient) -> None:
        self._client = client

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        logger.info("Collection service starting")

    async def process_shutdown(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        """Close client when ASGI server shuts down."""
        await self._client.aclose()
        logger.info("Collection service stopped")

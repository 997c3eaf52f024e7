"""API key middleware for service-to-service calls."""

import hmac

import falcon.asgi

from collection_service.domain.exceptions import APIKeyRequired, InvalidAPIKey
from collection_service.interfaces.api.middleware.public_paths import is_public_path

API_KEY_HEADER = "x-api-key"


class APIKeyMiddleware:
    """Requires ``x-api-key`` to match the configured secret."""

    def __init__(self, api_key: str) -> None:
        self._api_key = api_key

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        if req.method == "OPTIONS" or is_public_path(req.path):
            return
        provided = req.get_header(API_KEY_HEADER)
        if not provided:
            raise APIKeyRequired()
        if not hmac.compare_digest(provided.encode(), self._api_key.encode()):
            raise InvalidAPIKey()

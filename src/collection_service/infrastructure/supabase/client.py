"""Shared HTTP client for the Supabase REST and auth APIs."""

import httpx


class SupabaseClient:
    """Thin wrapper around one ``httpx.AsyncClient`` per process.

    Requests are authorised with the caller's bearer token when one is given,
    falling back to the anon key, so row-level security runs as the caller.
    """

    def __init__(
        self,
        url: str,
        anon_key: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._anon_key = anon_key
        self._http = httpx.AsyncClient(
            base_url=url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )

    @property
    def http(self) -> httpx.AsyncClient:
        return self._http

    def headers(self, token: str | None = None) -> dict[str, str]:
        """Headers for a request made on behalf of ``token``."""
        return {
            "apikey": self._anon_key,
            "Authorization": f"Bearer {token or self._anon_key}",
            "Accept": "application/json",
        }

    async def aclose(self) -> None:
        await self._http.aclose()

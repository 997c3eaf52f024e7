"""Supabase (PostgREST) collection repository implementation."""

from __future__ import annotations

from typing import Any

import httpx

from collection_service.application.dto import CollectionQuery
from collection_service.domain.entities import Collection
from collection_service.domain.exceptions import UpstreamFailure
from collection_service.infrastructure.supabase.client import SupabaseClient
from collection_service.logging import get_logger

logger = get_logger(__name__)

COLLECTIONS_PATH = "/rest/v1/collections"


def _quote(value: str) -> str:
    """Double-quote a PostgREST filter value, escaping backslashes and quotes."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _build_filter_params(query: CollectionQuery) -> list[tuple[str, str]]:
    """Translate a CollectionQuery into PostgREST query parameters.

    Repeated keys are ANDed by PostgREST, so ``public_only`` and an explicit
    ``is_public`` can both be sent.
    """
    params: list[tuple[str, str]] = []
    if query.owner_id:
        params.append(("owner_id", f"eq.{query.owner_id}"))
    if query.public_only:
        params.append(("is_public", "eq.true"))
    if query.is_public is not None:
        params.append(("is_public", f"eq.{'true' if query.is_public else 'false'}"))
    if query.tag:
        params.append(("tags", f"cs.{{{_quote(query.tag)}}}"))
    if query.search:
        pattern = _quote(f"*{query.search}*")
        params.append(("or", f"(name.ilike.{pattern},description.ilike.{pattern})"))
    return params


def _error_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text or resp.reason_phrase
    if isinstance(body, dict):
        return body.get("message") or body.get("error") or resp.reason_phrase
    return resp.reason_phrase


class SupabaseCollectionRepository:
    """Collection repository backed by the Supabase REST API."""

    def __init__(
        self,
        client: SupabaseClient,
        accounts_table: str = "students",
        owner_fk_name: str = "collections_owner_id_fkey",
    ) -> None:
        self._client = client
        self._select = f"*,owner:{accounts_table}!{owner_fk_name}(id,student_code,email)"

    async def list(self, token: str | None, query: CollectionQuery) -> list[Collection]:
        """List collections matching every condition, newest first."""
        params = [("select", self._select)]
        params.extend(_build_filter_params(query))
        params.append(("order", "created_at.desc"))
        rows = await self._request("GET", token, "fetch collections", params=params)
        return [Collection.from_row(r) for r in rows]

    async def get_by_id(self, token: str | None, collection_id: str) -> Collection | None:
        """Get collection by id, or None when no row matches."""
        params = [("select", self._select), ("id", f"eq.{collection_id}"), ("limit", "1")]
        rows = await self._request("GET", token, "fetch collection", params=params)
        return Collection.from_row(rows[0]) if rows else None

    async def create(self, token: str | None, row: dict[str, Any]) -> Collection:
        """Insert collection and return the stored, joined row."""
        rows = await self._request(
            "POST",
            token,
            "create collection",
            params=[("select", self._select)],
            json=row,
        )
        if not rows:
            raise UpstreamFailure("Failed to create collection: no row returned")
        return Collection.from_row(rows[0])

    async def update(
        self,
        token: str | None,
        collection_id: str,
        changes: dict[str, Any],
        *,
        owner_id: str,
    ) -> Collection | None:
        """Update collection owned by owner_id; None if no such row."""
        params = [
            ("select", self._select),
            ("id", f"eq.{collection_id}"),
            ("owner_id", f"eq.{owner_id}"),
        ]
        rows = await self._request(
            "PATCH", token, "update collection", params=params, json=changes
        )
        return Collection.from_row(rows[0]) if rows else None

    async def delete(self, token: str | None, collection_id: str, *, owner_id: str) -> bool:
        """Hard delete collection owned by owner_id."""
        params = [
            ("select", "id"),
            ("id", f"eq.{collection_id}"),
            ("owner_id", f"eq.{owner_id}"),
        ]
        rows = await self._request("DELETE", token, "delete collection", params=params)
        return bool(rows)

    async def _request(
        self,
        method: str,
        token: str | None,
        action: str,
        *,
        params: list[tuple[str, str]],
        json: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        headers = self._client.headers(token)
        if method != "GET":
            headers["Prefer"] = "return=representation"
        try:
            resp = await self._client.http.request(
                method, COLLECTIONS_PATH, params=params, json=json, headers=headers
            )
        except httpx.HTTPError as e:
            logger.error("Store request failed", action=action, error=str(e))
            raise UpstreamFailure(f"Failed to {action}: {e}") from e

        if resp.is_error:
            message = _error_message(resp)
            logger.error(
                "Store returned an error",
                action=action,
                status=resp.status_code,
                message=message,
            )
            status = resp.status_code if resp.status_code < 500 else 500
            raise UpstreamFailure(f"Failed to {action}: {message}", status=status)

        if resp.status_code == 204 or not resp.content:
            return []
        try:
            body = resp.json()
        except ValueError as e:
            logger.error("Store returned a non-JSON body", action=action)
            raise UpstreamFailure(f"Failed to {action}: invalid response body") from e
        return body if isinstance(body, list) else [body]

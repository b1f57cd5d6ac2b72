"""Shared plumbing for the domain API modules."""

from __future__ import annotations

from functools import partial
from typing import Any, Mapping

from bhaojan_client.models.envelope import ApiEnvelope, PaginatedCollection
from bhaojan_client.models.requests import RequestBody
from bhaojan_client.storage.credential_store import CredentialStore
from bhaojan_client.transport.client import ApiClient

DEFAULT_PAGE_SIZE = 10


class ApiModule:
    """A flat namespace of endpoint bindings over one ApiClient."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    @property
    def store(self) -> CredentialStore:
        return self._client.store

    async def _paginated(
        self,
        endpoint: str,
        page: int,
        limit: int,
        *,
        items_key: str = "data",
        params: Mapping[str, Any] | None = None,
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        query = {"page": page, "limit": limit, **(params or {})}
        parser = partial(
            PaginatedCollection.from_payload, page=page, limit=limit, items_key=items_key
        )
        return await self._client.get(endpoint, params=query, parse=parser)


def body(payload: RequestBody | Mapping[str, Any]) -> dict[str, Any]:
    """Serialise a request model (or pass a plain mapping through)."""
    if isinstance(payload, RequestBody):
        return payload.to_body()
    return dict(payload)

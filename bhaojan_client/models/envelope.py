"""Generic API response envelope and pagination models.

Every Bhaojan endpoint answers with the same envelope:
{ success: bool, message: str | None, response: T | None }

List endpoints put a page of items inside ``response``. The server uses two
shapes for that page (``{data, total, page, hasMore}`` for the mobile apps,
``{<items>, pagination: {page, limit, total, pages}}`` for the admin API);
PaginatedCollection normalises both.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, model_validator

from bhaojan_client.errors import ResponseShapeError

T = TypeVar("T")

_PAGE_KEYS = frozenset(
    {"pagination", "total", "page", "pages", "totalPages", "hasMore", "count", "limit"}
)


class ApiEnvelope(BaseModel, Generic[T]):
    """JSON envelope for all API responses."""

    success: bool
    message: str | None = None
    response: T | None = None

    model_config = {"extra": "ignore"}

    @model_validator(mode="after")
    def _drop_response_on_failure(self) -> "ApiEnvelope[T]":
        if not self.success:
            self.response = None
        return self

    @classmethod
    def failure(cls, message: str) -> "ApiEnvelope[Any]":
        return cls(success=False, message=message, response=None)


class PaginatedCollection(BaseModel, Generic[T]):
    """One page of a server-side collection."""

    data: list[T] = []
    total: int = Field(default=0, ge=0)
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)
    has_more: bool = False
    # Payload keys that are not part of the page itself (e.g. ratingDistribution)
    meta: dict[str, Any] = {}

    @classmethod
    def from_payload(
        cls,
        payload: Any,
        *,
        page: int,
        limit: int,
        items_key: str = "data",
    ) -> "PaginatedCollection[Any]":
        """Build a page from a raw ``response`` payload.

        ``has_more`` is derived from the totals rather than trusted from the
        server so that it is false exactly when ``page * limit >= total``.

        Raises
        ------
        ResponseShapeError
            If the payload is not an object or the items are not a list.
        """
        if not isinstance(payload, dict):
            raise ResponseShapeError("Paginated response is not an object")

        items = payload.get(items_key)
        if not isinstance(items, list):
            raise ResponseShapeError(f"Paginated response has no '{items_key}' list")

        meta = payload.get("pagination")
        meta = meta if isinstance(meta, dict) else {}

        limit = _positive_int(meta.get("limit"), limit)
        page = _positive_int(payload.get("page", meta.get("page")), page)
        total = payload.get("total", meta.get("total"))
        if isinstance(total, bool) or not isinstance(total, int) or total < 0:
            total = (page - 1) * limit + len(items)

        return cls(
            data=items[:limit],
            total=total,
            page=page,
            limit=limit,
            has_more=page * limit < total,
            meta={
                k: v
                for k, v in payload.items()
                if k != items_key and k not in _PAGE_KEYS
            },
        )


def _positive_int(value: Any, fallback: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return fallback
    return value

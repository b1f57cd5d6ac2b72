"""Delivery partner earnings endpoints."""

from __future__ import annotations

from typing import Any

from bhaojan_client.api.base import DEFAULT_PAGE_SIZE, ApiModule
from bhaojan_client.models.envelope import ApiEnvelope, PaginatedCollection


class PartnerEarningsApi(ApiModule):
    async def summary(self) -> ApiEnvelope[Any]:
        """Today / week / month / total earnings, delivery counts, tips, rating."""
        return await self._client.get("/delivery-partner/earnings")

    async def history(
        self, page: int = 1, limit: int = DEFAULT_PAGE_SIZE
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        """Per-day earnings, newest first."""
        return await self._paginated("/delivery-partner/earnings/history", page, limit)

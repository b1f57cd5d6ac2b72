"""Admin dashboard counters and charts."""

from __future__ import annotations

from typing import Any

from bhaojan_client.api.base import ApiModule
from bhaojan_client.models.envelope import ApiEnvelope
from bhaojan_client.models.requests import AnalyticsFilter


class AdminStatsApi(ApiModule):
    async def stats(self) -> ApiEnvelope[Any]:
        return await self._client.get("/admin/stats")

    async def analytics(
        self, filter: AnalyticsFilter | str = AnalyticsFilter.MONTHLY
    ) -> ApiEnvelope[Any]:
        """Chart series for the dashboard; unknown filters fail without a request."""
        try:
            value = AnalyticsFilter(filter).value
        except ValueError:
            allowed = ", ".join(f.value for f in AnalyticsFilter)
            return ApiEnvelope.failure(f"Unknown analytics filter '{filter}' (expected {allowed})")
        return await self._client.get("/admin/analytics", params={"filter": value})

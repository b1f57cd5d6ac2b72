"""In-app notification inbox (all protected)."""

from __future__ import annotations

from typing import Any

from bhaojan_client.api.base import ApiModule
from bhaojan_client.models.envelope import ApiEnvelope


class NotificationsApi(ApiModule):
    async def list(self) -> ApiEnvelope[Any]:
        """Response: notifications and unreadCount."""
        return await self._client.get("/notifications")

    async def mark_as_read(self, notification_id: str) -> ApiEnvelope[Any]:
        return await self._client.put(f"/notifications/{notification_id}/read")

    async def mark_all_as_read(self) -> ApiEnvelope[Any]:
        return await self._client.put("/notifications/read-all")

    async def delete(self, notification_id: str) -> ApiEnvelope[Any]:
        return await self._client.delete(f"/notifications/{notification_id}")

    async def delete_all(self) -> ApiEnvelope[Any]:
        return await self._client.delete("/notifications/all")

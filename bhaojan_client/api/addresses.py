"""Saved delivery addresses (all protected)."""

from __future__ import annotations

from typing import Any, Mapping

from bhaojan_client.api.base import ApiModule, body
from bhaojan_client.models.envelope import ApiEnvelope
from bhaojan_client.models.requests import AddressInput


class AddressesApi(ApiModule):
    async def list(self) -> ApiEnvelope[Any]:
        return await self._client.get("/addresses")

    async def get(self, address_id: str) -> ApiEnvelope[Any]:
        return await self._client.get(f"/addresses/{address_id}")

    async def create(self, address: AddressInput | Mapping[str, Any]) -> ApiEnvelope[Any]:
        return await self._client.post("/addresses", json=body(address))

    async def update(
        self, address_id: str, address: AddressInput | Mapping[str, Any]
    ) -> ApiEnvelope[Any]:
        return await self._client.put(f"/addresses/{address_id}", json=body(address))

    async def delete(self, address_id: str) -> ApiEnvelope[Any]:
        return await self._client.delete(f"/addresses/{address_id}")

    async def set_default(self, address_id: str) -> ApiEnvelope[Any]:
        return await self._client.put(f"/addresses/{address_id}/default")

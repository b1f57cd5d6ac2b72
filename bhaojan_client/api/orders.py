"""Customer order endpoints and coupon validation (all protected)."""

from __future__ import annotations

from typing import Any, Mapping

from bhaojan_client.api.base import ApiModule, body
from bhaojan_client.models.envelope import ApiEnvelope
from bhaojan_client.models.requests import OrderCreate


class OrdersApi(ApiModule):
    async def create(self, order: OrderCreate | Mapping[str, Any]) -> ApiEnvelope[Any]:
        """Place an order. Response: the order and its payment transaction."""
        return await self._client.post("/orders", json=body(order))

    async def list(self) -> ApiEnvelope[Any]:
        return await self._client.get("/orders")

    async def get(self, order_id: str) -> ApiEnvelope[Any]:
        return await self._client.get(f"/orders/{order_id}")

    async def cancel(self, order_id: str, reason: str | None = None) -> ApiEnvelope[Any]:
        payload = {"reason": reason} if reason else {}
        return await self._client.put(f"/orders/{order_id}/cancel", json=payload)

    async def transactions(self) -> ApiEnvelope[Any]:
        return await self._client.get("/orders/transactions")


class CouponsApi(ApiModule):
    async def validate(self, code: str, order_total: float) -> ApiEnvelope[Any]:
        return await self._client.post(
            "/coupons/validate", json={"code": code, "orderTotal": order_total}
        )

    async def list(self) -> ApiEnvelope[Any]:
        return await self._client.get("/coupons")

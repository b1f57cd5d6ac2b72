"""Vendor console endpoints (/vendor/*), used from the customer app by
accounts that sell products."""

from __future__ import annotations

from typing import Any, Mapping

from bhaojan_client.api.base import DEFAULT_PAGE_SIZE, ApiModule, body
from bhaojan_client.api.wallet import WALLET_PAGE_SIZE
from bhaojan_client.models.envelope import ApiEnvelope, PaginatedCollection
from bhaojan_client.models.requests import ProductInput, WithdrawalRequest


class VendorApi(ApiModule):
    async def products(
        self, page: int = 1, limit: int = DEFAULT_PAGE_SIZE
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        return await self._paginated("/vendor/products", page, limit)

    async def create_product(self, product: ProductInput | Mapping[str, Any]) -> ApiEnvelope[Any]:
        return await self._client.post("/vendor/products", json=body(product))

    async def update_product(
        self, product_id: str, product: ProductInput | Mapping[str, Any]
    ) -> ApiEnvelope[Any]:
        return await self._client.put(f"/vendor/products/{product_id}", json=body(product))

    async def delete_product(self, product_id: str) -> ApiEnvelope[Any]:
        return await self._client.delete(f"/vendor/products/{product_id}")

    async def orders(
        self, page: int = 1, limit: int = DEFAULT_PAGE_SIZE, status: str | None = None
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        return await self._paginated("/vendor/orders", page, limit, params={"status": status})

    async def update_order_status(self, order_id: str, status: str) -> ApiEnvelope[Any]:
        return await self._client.put(f"/vendor/orders/{order_id}/status", json={"status": status})

    async def analytics(self) -> ApiEnvelope[Any]:
        return await self._client.get("/vendor/analytics")

    async def request_withdrawal(
        self, request: WithdrawalRequest | Mapping[str, Any]
    ) -> ApiEnvelope[Any]:
        return await self._client.post("/wallet/withdraw", json=body(request))

    async def wallet_transactions(
        self, page: int = 1, limit: int = WALLET_PAGE_SIZE
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        return await self._paginated("/wallet/transactions", page, limit)

    async def withdrawal_history(
        self, page: int = 1, limit: int = WALLET_PAGE_SIZE
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        return await self._paginated("/wallet/withdrawals", page, limit)

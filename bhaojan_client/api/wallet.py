"""Wallet endpoints for delivery partners and for customers/vendors.

Both wallets share the same withdrawal body; they differ in prefix and in
which token the server expects.
"""

from __future__ import annotations

from typing import Any, Mapping

from bhaojan_client.api.base import ApiModule, body
from bhaojan_client.models.envelope import ApiEnvelope, PaginatedCollection
from bhaojan_client.models.requests import WithdrawalRequest

WALLET_PAGE_SIZE = 20


class PartnerWalletApi(ApiModule):
    """Bindings for /delivery-partner/wallet/*."""

    async def balance(self) -> ApiEnvelope[Any]:
        return await self._client.get("/delivery-partner/wallet/balance")

    async def withdraw(self, request: WithdrawalRequest | Mapping[str, Any]) -> ApiEnvelope[Any]:
        return await self._client.post("/delivery-partner/wallet/withdraw", json=body(request))

    async def withdrawals(
        self, page: int = 1, limit: int = WALLET_PAGE_SIZE
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        return await self._paginated("/delivery-partner/wallet/withdrawals", page, limit)


class WalletApi(ApiModule):
    """Bindings for /wallet/* (customer and vendor accounts)."""

    async def balance(self) -> ApiEnvelope[Any]:
        return await self._client.get("/wallet/balance")

    async def summary(self) -> ApiEnvelope[Any]:
        return await self._client.get("/wallet/summary")

    async def transactions(
        self, page: int = 1, limit: int = WALLET_PAGE_SIZE, type: str | None = None
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        return await self._paginated("/wallet/transactions", page, limit, params={"type": type})

    async def withdraw(self, request: WithdrawalRequest | Mapping[str, Any]) -> ApiEnvelope[Any]:
        return await self._client.post("/wallet/withdraw", json=body(request))

    async def withdrawals(
        self, page: int = 1, limit: int = WALLET_PAGE_SIZE, status: str | None = None
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        return await self._paginated(
            "/wallet/withdrawals", page, limit, params={"status": status}
        )

"""Admin management of customers and vendors."""

from __future__ import annotations

from typing import Any, Mapping

from bhaojan_client.api.base import DEFAULT_PAGE_SIZE, ApiModule, body
from bhaojan_client.models.envelope import ApiEnvelope, PaginatedCollection
from bhaojan_client.models.requests import KycDecision


def _block_body(reason: str | None) -> dict[str, Any]:
    return {"reason": reason} if reason else {}


class AdminUsersApi(ApiModule):
    async def list(
        self,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        *,
        search: str | None = None,
        status: str | None = None,
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        return await self._paginated(
            "/admin/users",
            page,
            limit,
            items_key="users",
            params={"search": search, "status": status},
        )

    async def get(self, user_id: str) -> ApiEnvelope[Any]:
        return await self._client.get(f"/admin/users/{user_id}")

    async def toggle_block(self, user_id: str, reason: str | None = None) -> ApiEnvelope[Any]:
        return await self._client.put(f"/admin/users/{user_id}/block", json=_block_body(reason))


class AdminVendorsApi(ApiModule):
    async def list(
        self,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        *,
        search: str | None = None,
        status: str | None = None,
        kyc_status: str | None = None,
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        return await self._paginated(
            "/admin/vendors",
            page,
            limit,
            items_key="vendors",
            params={"search": search, "status": status, "kycStatus": kyc_status},
        )

    async def get(self, vendor_id: str) -> ApiEnvelope[Any]:
        return await self._client.get(f"/admin/vendors/{vendor_id}")

    async def toggle_block(self, vendor_id: str, reason: str | None = None) -> ApiEnvelope[Any]:
        return await self._client.put(
            f"/admin/vendors/{vendor_id}/block", json=_block_body(reason)
        )

    async def update_kyc(
        self, vendor_id: str, decision: KycDecision | Mapping[str, Any]
    ) -> ApiEnvelope[Any]:
        """Approve or reject a vendor's KYC submission."""
        return await self._client.put(f"/admin/vendors/{vendor_id}/kyc", json=body(decision))

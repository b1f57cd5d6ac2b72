"""Delivery partner order endpoints.

The client never decides order status transitions. accept, pickup and
delivery calls ask the server to advance the order and return whatever it
answers; an illegal transition comes back as a failure envelope carrying the
server's message. Callers re-fetch the order to see its new status.

Pickup and delivery are OTP gated: ``initiate_pickup`` makes the server send
an OTP to the vendor and ``verify_pickup_otp`` submits the code the partner
was given. Delivery works the same way with the customer's OTP.
"""

from __future__ import annotations

from typing import Any

from bhaojan_client.api.base import DEFAULT_PAGE_SIZE, ApiModule
from bhaojan_client.models.envelope import ApiEnvelope, PaginatedCollection

_PREFIX = "/delivery-partner/orders"


class PartnerOrdersApi(ApiModule):
    """Bindings for /delivery-partner/orders/*."""

    async def available(
        self, page: int = 1, limit: int = DEFAULT_PAGE_SIZE
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        """Orders ready for pickup that no partner has accepted yet."""
        return await self._paginated(f"{_PREFIX}/available", page, limit)

    async def active(
        self, page: int = 1, limit: int = DEFAULT_PAGE_SIZE
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        """Orders accepted by this partner and not yet delivered."""
        return await self._paginated(f"{_PREFIX}/active", page, limit)

    async def history(
        self, page: int = 1, limit: int = DEFAULT_PAGE_SIZE
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        return await self._paginated(f"{_PREFIX}/history", page, limit)

    async def get(self, order_id: str) -> ApiEnvelope[Any]:
        return await self._client.get(f"{_PREFIX}/{order_id}")

    async def accept(self, order_id: str) -> ApiEnvelope[Any]:
        return await self._client.post(f"{_PREFIX}/{order_id}/accept")

    async def initiate_pickup(self, order_id: str) -> ApiEnvelope[Any]:
        return await self._client.post(f"{_PREFIX}/{order_id}/initiate-pickup")

    async def verify_pickup_otp(self, order_id: str, otp: str) -> ApiEnvelope[Any]:
        return await self._client.post(f"{_PREFIX}/{order_id}/verify-pickup", json={"otp": otp})

    async def initiate_delivery(self, order_id: str) -> ApiEnvelope[Any]:
        return await self._client.post(f"{_PREFIX}/{order_id}/initiate-delivery")

    async def verify_delivery_otp(self, order_id: str, otp: str) -> ApiEnvelope[Any]:
        return await self._client.post(
            f"{_PREFIX}/{order_id}/verify-delivery", json={"otp": otp}
        )

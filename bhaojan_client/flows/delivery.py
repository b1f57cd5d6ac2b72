"""OTP-gated pickup and delivery handoff for one order.

The partner app walks an accepted order through two handoffs. Each one is a
pair of calls: ``start_*`` makes the server send a six-digit OTP to the other
party (vendor for pickup, customer for delivery) and ``confirm_*`` submits
the code the partner was told. After a confirmed handoff the order is
re-fetched so ``status`` reflects what the server recorded.

Key behaviors:
- An OTP that is not exactly six ASCII digits is rejected locally; no
  request is sent
- Only one handoff action runs at a time; a second tap while one is in
  flight returns None
- The client never advances ``status`` itself; it only mirrors the server
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Any, Awaitable, Callable

from bhaojan_client.api.partner_orders import PartnerOrdersApi
from bhaojan_client.concurrency import InFlightGuard
from bhaojan_client.errors import INCOMPLETE_OTP_MESSAGE
from bhaojan_client.models.envelope import ApiEnvelope

logger = logging.getLogger(__name__)

OTP_LENGTH = 6
_OTP_PATTERN = re.compile(rf"[0-9]{{{OTP_LENGTH}}}")


class HandoffStage(str, Enum):
    PICKUP = "pickup"
    DELIVERY = "delivery"


def is_complete_otp(otp: str) -> bool:
    return bool(_OTP_PATTERN.fullmatch(otp))


class DeliveryHandoff:
    """State holder for the delivery detail screen of a single order.

    Parameters
    ----------
    orders:
        Partner order bindings used for every call.
    order_id:
        The order being handed off.
    guard:
        Optional shared InFlightGuard; a private one is created otherwise.
    """

    def __init__(
        self,
        orders: PartnerOrdersApi,
        order_id: str,
        guard: InFlightGuard | None = None,
    ) -> None:
        self._orders = orders
        self._order_id = order_id
        self._guard = guard or InFlightGuard()
        self.order: dict[str, Any] | None = None
        self.awaiting_otp: HandoffStage | None = None
        self.error: str | None = None

    @property
    def order_id(self) -> str:
        return self._order_id

    @property
    def status(self) -> str | None:
        if self.order is None:
            return None
        status = self.order.get("status")
        return status if isinstance(status, str) else None

    @property
    def otp_pending(self) -> bool:
        return self.awaiting_otp is not None

    @property
    def loading(self) -> bool:
        return self._guard.is_busy(self._guard_key)

    @property
    def _guard_key(self) -> tuple[str, str]:
        return ("handoff", self._order_id)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    async def refresh(self) -> ApiEnvelope[Any]:
        result = await self._orders.get(self._order_id)
        if result.success and isinstance(result.response, dict):
            self.order = result.response
        return result

    async def start_pickup(self) -> ApiEnvelope[Any] | None:
        return await self._start(HandoffStage.PICKUP, self._orders.initiate_pickup)

    async def confirm_pickup(self, otp: str) -> ApiEnvelope[Any] | None:
        return await self._confirm(HandoffStage.PICKUP, otp, self._orders.verify_pickup_otp)

    async def start_delivery(self) -> ApiEnvelope[Any] | None:
        return await self._start(HandoffStage.DELIVERY, self._orders.initiate_delivery)

    async def confirm_delivery(self, otp: str) -> ApiEnvelope[Any] | None:
        return await self._confirm(HandoffStage.DELIVERY, otp, self._orders.verify_delivery_otp)

    def cancel_otp(self) -> None:
        """Dismiss the OTP prompt without calling the server."""
        self.awaiting_otp = None
        self.error = None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    async def _start(
        self,
        stage: HandoffStage,
        initiate: Callable[[str], Awaitable[ApiEnvelope[Any]]],
    ) -> ApiEnvelope[Any] | None:
        async def action() -> ApiEnvelope[Any]:
            result = await initiate(self._order_id)
            if result.success:
                self.awaiting_otp = stage
                self.error = None
            else:
                self.error = result.message
            return result

        return await self._guard.run(self._guard_key, action)

    async def _confirm(
        self,
        stage: HandoffStage,
        otp: str,
        verify: Callable[[str, str], Awaitable[ApiEnvelope[Any]]],
    ) -> ApiEnvelope[Any] | None:
        otp = otp.strip()
        if not is_complete_otp(otp):
            self.error = INCOMPLETE_OTP_MESSAGE
            return ApiEnvelope.failure(INCOMPLETE_OTP_MESSAGE)

        async def action() -> ApiEnvelope[Any]:
            result = await verify(self._order_id, otp)
            if not result.success:
                # The prompt stays open so the partner can retype the code
                self.error = result.message
                return result

            logger.info("Order %s %s confirmed", self._order_id, stage.value)
            self.awaiting_otp = None
            self.error = None
            await self.refresh()
            return result

        return await self._guard.run(self._guard_key, action)

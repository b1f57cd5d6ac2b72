"""Delivery partner authentication and profile endpoints.

Login is OTP based: ``login`` asks the server to send an OTP to the phone and
``verify_otp`` exchanges it for a bearer token. Calls that return a fresh
partner record also write it to the credential store, so the app can show
profile data without an extra round trip.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from bhaojan_client.api.base import ApiModule, body
from bhaojan_client.models.envelope import ApiEnvelope
from bhaojan_client.models.requests import PartnerProfileUpdate, PartnerVehicleSetup

logger = logging.getLogger(__name__)

_PREFIX = "/delivery-partner/auth"


class PartnerAuthApi(ApiModule):
    """Bindings for /delivery-partner/auth/*."""

    async def login(self, phone: str) -> ApiEnvelope[Any]:
        """Request an OTP. Response: phone, isNewUser, isProfileComplete, isBlocked."""
        return await self._client.post(f"{_PREFIX}/login", json={"phone": phone})

    async def verify_otp(
        self, phone: str, otp: str, push_token: str | None = None
    ) -> ApiEnvelope[Any]:
        """Exchange an OTP for a session; stores token and partner on success."""
        payload: dict[str, Any] = {"phone": phone, "otp": otp}
        if push_token:
            payload["expoPushToken"] = push_token
        result = await self._client.post(f"{_PREFIX}/verify-otp", json=payload)

        if result.success and isinstance(result.response, dict):
            token = result.response.get("token")
            partner = result.response.get("partner")
            if token and isinstance(partner, dict):
                await self.store.set_token(token)
                await self.store.set_profile(partner)
            else:
                logger.warning("verify-otp succeeded without token or partner in response")
        return result

    async def resend_otp(self, phone: str) -> ApiEnvelope[Any]:
        return await self._client.post(f"{_PREFIX}/resend-otp", json={"phone": phone})

    async def complete_profile(
        self, setup: PartnerVehicleSetup | Mapping[str, Any]
    ) -> ApiEnvelope[Any]:
        """Submit name and vehicle details for a newly registered partner."""
        result = await self._client.post(f"{_PREFIX}/complete-profile", json=body(setup))
        if result.success and isinstance(result.response, dict):
            partner = result.response.get("partner")
            if isinstance(partner, dict):
                await self.store.set_profile(partner)
        return result

    async def get_me(self) -> ApiEnvelope[Any]:
        result = await self._client.get(f"{_PREFIX}/me")
        if result.success and isinstance(result.response, dict):
            await self.store.set_profile(result.response)
        return result

    async def update_profile(
        self, update: PartnerProfileUpdate | Mapping[str, Any]
    ) -> ApiEnvelope[Any]:
        result = await self._client.put(f"{_PREFIX}/profile", json=body(update))
        if result.success and isinstance(result.response, dict):
            await self.store.set_profile(result.response)
        return result

    async def toggle_online(self) -> ApiEnvelope[Any]:
        """Flip availability; merges the new ``isOnline`` flag into the profile."""
        result = await self._client.put(f"{_PREFIX}/toggle-online")
        if result.success and isinstance(result.response, dict) and "isOnline" in result.response:
            await self.store.merge_profile({"isOnline": result.response["isOnline"]})
        return result

    async def logout(self) -> ApiEnvelope[Any]:
        """Invalidate the server session. Local credentials are cleared regardless."""
        result = await self._client.post(f"{_PREFIX}/logout")
        await self.store.clear_all()
        return result

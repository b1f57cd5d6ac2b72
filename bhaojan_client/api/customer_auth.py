"""Customer account endpoints (/auth/*).

Same OTP login as the partner app, with a customer (or vendor) user record
as the profile snapshot.
"""

from __future__ import annotations

from typing import Any, Mapping

from bhaojan_client.api.base import ApiModule, body
from bhaojan_client.models.envelope import ApiEnvelope
from bhaojan_client.models.requests import (
    CustomerProfileUpdate,
    CustomerRegistration,
    NotificationSettingsUpdate,
)


class CustomerAuthApi(ApiModule):
    async def login(self, phone: str) -> ApiEnvelope[Any]:
        return await self._client.post("/auth/login", json={"phone": phone})

    async def verify_otp(
        self, phone: str, otp: str, push_token: str | None = None
    ) -> ApiEnvelope[Any]:
        payload: dict[str, Any] = {"phone": phone, "otp": otp}
        if push_token:
            payload["expoPushToken"] = push_token
        result = await self._client.post("/auth/verify-otp", json=payload)

        if result.success and isinstance(result.response, dict):
            token = result.response.get("token")
            user = result.response.get("user")
            if token and isinstance(user, dict):
                await self.store.set_token(token)
                await self.store.set_profile(user)
        return result

    async def resend_otp(self, phone: str) -> ApiEnvelope[Any]:
        return await self._client.post("/auth/resend-otp", json={"phone": phone})

    async def register(
        self, registration: CustomerRegistration | Mapping[str, Any]
    ) -> ApiEnvelope[Any]:
        return await self._client.post("/auth/register", json=body(registration))

    async def get_me(self) -> ApiEnvelope[Any]:
        result = await self._client.get("/auth/me")
        if result.success and isinstance(result.response, dict):
            await self.store.set_profile(result.response)
        return result

    async def update_profile(
        self, update: CustomerProfileUpdate | Mapping[str, Any]
    ) -> ApiEnvelope[Any]:
        result = await self._client.put("/auth/profile", json=body(update))
        if result.success and isinstance(result.response, dict):
            await self.store.set_profile(result.response)
        return result

    async def update_push_token(self, push_token: str) -> ApiEnvelope[Any]:
        return await self._client.put("/auth/push-token", json={"expoPushToken": push_token})

    async def logout(self) -> ApiEnvelope[Any]:
        result = await self._client.post("/auth/logout")
        await self.store.clear_all()
        return result

    async def get_notification_settings(self) -> ApiEnvelope[Any]:
        return await self._client.get("/auth/notification-settings")

    async def update_notification_settings(
        self, settings: NotificationSettingsUpdate | Mapping[str, Any]
    ) -> ApiEnvelope[Any]:
        return await self._client.put("/auth/notification-settings", json=body(settings))

"""Admin dashboard authentication (/admin/login, /admin/me, /admin/setup).

Admins sign in with email and password instead of an OTP. There is no server
side logout; ``logout`` only forgets the local session.
"""

from __future__ import annotations

import logging
from typing import Any

from bhaojan_client.api.base import ApiModule
from bhaojan_client.models.envelope import ApiEnvelope

logger = logging.getLogger(__name__)


class AdminAuthApi(ApiModule):
    async def login(self, email: str, password: str) -> ApiEnvelope[Any]:
        """Sign in; stores the token and the ``admin`` record on success.

        Bad credentials come back from the server as a 401, which the client
        reports as an expired session like any other 401.
        """
        result = await self._client.post(
            "/admin/login", json={"email": email, "password": password}
        )
        if result.success and isinstance(result.response, dict):
            token = result.response.get("token")
            admin = result.response.get("admin")
            if token and isinstance(admin, dict):
                await self.store.set_token(token)
                await self.store.set_profile(admin)
            else:
                logger.warning("admin login succeeded without token or admin in response")
        return result

    async def get_me(self) -> ApiEnvelope[Any]:
        result = await self._client.get("/admin/me")
        if result.success and isinstance(result.response, dict):
            await self.store.set_profile(result.response)
        return result

    async def setup(self) -> ApiEnvelope[Any]:
        """Create the default admin account on a fresh server."""
        return await self._client.post("/admin/setup")

    async def logout(self) -> None:
        await self.store.clear_all()

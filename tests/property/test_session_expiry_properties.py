"""Property tests for HTTP 401 handling.

Whatever the 401 body looks like, the call fails, the token and profile are
gone when it returns, and the expiry callback ran exactly once after the
credentials were cleared.
"""

from __future__ import annotations

import httpx
import pytest
from hypothesis import given, settings, strategies as st

from bhaojan_client.errors import SESSION_EXPIRED_MESSAGE
from bhaojan_client.session import SessionExpiryNotifier
from bhaojan_client.storage import CredentialStore, MemoryBackend
from bhaojan_client.transport.client import ApiClient
from tests.strategies import TEST_BASE_URL, endpoints, profiles, tokens

unauthorized_bodies = st.sampled_from(
    [
        {"json": {"success": False, "message": "Not authorized"}},
        {"json": {}},
        {"text": "Unauthorized"},
        {},
    ]
)


@settings(max_examples=100)
@given(
    token=st.one_of(st.none(), tokens),
    profile=profiles,
    endpoint=endpoints,
    body=unauthorized_bodies,
    sync_callback=st.booleans(),
)
@pytest.mark.asyncio
async def test_401_clears_credentials_then_notifies_once(
    token: str | None,
    profile: dict,
    endpoint: str,
    body: dict,
    sync_callback: bool,
) -> None:
    backend = MemoryBackend({"partnerSettings": "x"})
    store = CredentialStore(
        backend, token_key="partnerToken", profile_key="partnerData", clear_prefixes=["partner"]
    )
    if token is not None:
        await store.set_token(token)
    await store.set_profile(profile)

    seen_at_notify: list[list[str]] = []

    def sync_cb() -> None:
        seen_at_notify.append(list(backend._data))

    async def async_cb() -> None:
        seen_at_notify.append(await backend.keys())

    notifier = SessionExpiryNotifier(sync_cb if sync_callback else async_cb)
    transport = httpx.MockTransport(lambda request: httpx.Response(401, **body))

    async with ApiClient(TEST_BASE_URL, store, notifier, transport=transport) as client:
        result = await client.get(endpoint)

    assert result.success is False
    assert result.message == SESSION_EXPIRED_MESSAGE
    assert await store.get_token() is None
    assert await store.get_profile() is None
    assert seen_at_notify == [[]]

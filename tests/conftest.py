"""Shared test fixtures for the client test suite."""

from __future__ import annotations

import os
from typing import Callable

import httpx
import pytest
import pytest_asyncio

from bhaojan_client.apps import AdminApp, CustomerApp, PartnerApp
from bhaojan_client.apps import build_admin_app, build_customer_app, build_partner_app
from bhaojan_client.config import PARTNER_APP, AppProfile, ClientSettings, default_profiles
from bhaojan_client.session.notifier import SessionExpiryNotifier
from bhaojan_client.storage import CredentialStore, MemoryBackend
from bhaojan_client.transport.client import ApiClient
from tests.fake_server import BASE_URL, FakeState, create_fake_server
from tests.strategies import TEST_BASE_URL


# ---------------------------------------------------------------------------
# Keep BHAOJAN_* variables from the developer's shell out of the tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("BHAOJAN_"):
            monkeypatch.delenv(key)


# ---------------------------------------------------------------------------
# Settings and storage fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def settings(tmp_path) -> ClientSettings:
    """Settings pointing storage at a temp dir and every app at the fake server."""
    return ClientSettings(
        storage_path=str(tmp_path / "credentials.json"),
        partner_base_url=BASE_URL,
        customer_base_url=BASE_URL,
        admin_base_url=BASE_URL,
    )


@pytest.fixture
def partner_profile() -> AppProfile:
    return default_profiles()[PARTNER_APP]


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def store(backend: MemoryBackend, partner_profile: AppProfile) -> CredentialStore:
    return CredentialStore.for_app(partner_profile, backend)


@pytest.fixture
def notifier() -> SessionExpiryNotifier:
    return SessionExpiryNotifier()


# ---------------------------------------------------------------------------
# HTTP fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def make_client(store: CredentialStore, notifier: SessionExpiryNotifier):
    """Factory for ApiClients whose requests are answered by ``handler``."""
    clients: list[ApiClient] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> ApiClient:
        client = ApiClient(
            TEST_BASE_URL, store, notifier, transport=httpx.MockTransport(handler)
        )
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.aclose()


@pytest.fixture
def server_state() -> FakeState:
    return FakeState()


@pytest.fixture
def transport(server_state: FakeState) -> httpx.ASGITransport:
    return httpx.ASGITransport(app=create_fake_server(server_state))


@pytest_asyncio.fixture
async def partner_app(settings, backend, transport) -> PartnerApp:
    app = build_partner_app(settings, backend=backend, transport=transport)
    yield app
    await app.aclose()


@pytest_asyncio.fixture
async def customer_app(settings, transport) -> CustomerApp:
    app = build_customer_app(settings, backend=MemoryBackend(), transport=transport)
    yield app
    await app.aclose()


@pytest_asyncio.fixture
async def admin_app(settings, transport) -> AdminApp:
    app = build_admin_app(settings, backend=MemoryBackend(), transport=transport)
    yield app
    await app.aclose()


"""Unit tests for ApiClient.request()."""

from __future__ import annotations

import json

import httpx
import pytest

from bhaojan_client.errors import (
    GENERIC_ERROR_MESSAGE,
    NETWORK_ERROR_MESSAGE,
    SERVER_ERROR_MESSAGE,
    SESSION_EXPIRED_MESSAGE,
    UNEXPECTED_RESPONSE_MESSAGE,
    ResponseShapeError,
)
from bhaojan_client.models.envelope import PaginatedCollection
from bhaojan_client.session.notifier import SessionExpiryNotifier
from bhaojan_client.storage import CredentialStore, JsonFileBackend
from bhaojan_client.transport.client import ApiClient
from tests.strategies import TEST_BASE_URL


def _json(status: int, body: object) -> httpx.Response:
    return httpx.Response(status, json=body)


class TestRequestHeaders:
    @pytest.mark.asyncio
    async def test_bearer_token_attached_when_stored(self, make_client, store) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return _json(200, {"success": True, "response": None})

        await store.set_token("jwt-123")
        await make_client(handler).get("/delivery-partner/auth/me")

        assert seen[0].headers["Authorization"] == "Bearer jwt-123"
        assert seen[0].headers["Content-Type"] == "application/json"
        assert seen[0].headers["X-Request-ID"]
        assert str(seen[0].url) == "https://api.test/api/delivery-partner/auth/me"

    @pytest.mark.asyncio
    async def test_no_authorization_without_token(self, make_client) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return _json(200, {"success": True})

        await make_client(handler).post("/auth/login", json={"phone": "9876543210"})

        assert "Authorization" not in seen[0].headers
        assert json.loads(seen[0].content) == {"phone": "9876543210"}

    @pytest.mark.asyncio
    async def test_caller_cannot_override_authorization(self, make_client) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return _json(200, {"success": True})

        await make_client(handler).get(
            "/products", headers={"Authorization": "Bearer forged", "X-App-Version": "1.0"}
        )

        assert "Authorization" not in seen[0].headers
        assert seen[0].headers["X-App-Version"] == "1.0"

    @pytest.mark.asyncio
    async def test_none_params_are_dropped(self, make_client) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return _json(200, {"success": True})

        await make_client(handler).get("/products", params={"page": 2, "search": None})

        assert dict(seen[0].url.params) == {"page": "2"}


class TestResponseMapping:
    @pytest.mark.asyncio
    async def test_success_envelope_passes_through(self, make_client) -> None:
        client = make_client(
            lambda r: _json(200, {"success": True, "message": "ok", "response": {"id": "o1"}})
        )
        result = await client.get("/orders/o1")

        assert result.success
        assert result.message == "ok"
        assert result.response == {"id": "o1"}

    @pytest.mark.asyncio
    async def test_4xx_json_surfaces_server_message(self, make_client) -> None:
        client = make_client(
            lambda r: _json(400, {"success": False, "message": "Order cannot be accepted"})
        )
        result = await client.post("/delivery-partner/orders/o1/accept")

        assert not result.success
        assert result.message == "Order cannot be accepted"
        assert result.response is None

    @pytest.mark.asyncio
    async def test_4xx_json_without_message_is_generic(self, make_client) -> None:
        result = await make_client(lambda r: _json(422, {"errors": []})).get("/x")
        assert result.message == GENERIC_ERROR_MESSAGE

    @pytest.mark.asyncio
    async def test_html_500_becomes_server_error(self, make_client) -> None:
        client = make_client(lambda r: httpx.Response(500, text="<html>Traceback...</html>"))
        result = await client.get("/products")

        assert not result.success
        assert result.message == SERVER_ERROR_MESSAGE
        assert "Traceback" not in result.message

    @pytest.mark.asyncio
    async def test_html_502_names_status(self, make_client) -> None:
        result = await make_client(lambda r: httpx.Response(502, text="Bad Gateway")).get("/x")
        assert result.message == "Server returned an error (502)"

    @pytest.mark.asyncio
    async def test_2xx_without_envelope_is_failure(self, make_client) -> None:
        result = await make_client(lambda r: _json(200, [1, 2, 3])).get("/x")
        assert not result.success
        assert result.message == "Server returned an error (200)"

    @pytest.mark.asyncio
    async def test_failure_envelope_drops_response(self, make_client) -> None:
        client = make_client(
            lambda r: _json(200, {"success": False, "message": "No", "response": {"x": 1}})
        )
        result = await client.get("/x")
        assert result.response is None
        assert result.message == "No"

    @pytest.mark.asyncio
    async def test_network_error_is_failure(self, make_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        result = await make_client(handler).get("/products")

        assert not result.success
        assert result.message == NETWORK_ERROR_MESSAGE

    @pytest.mark.asyncio
    async def test_timeout_is_failure(self, make_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        result = await make_client(handler).get("/products")
        assert result.message == NETWORK_ERROR_MESSAGE


class TestParse:
    @pytest.mark.asyncio
    async def test_parse_maps_payload(self, make_client) -> None:
        body = {
            "success": True,
            "response": {"data": [{"id": 1}], "total": 1, "page": 1, "hasMore": False},
        }
        client = make_client(lambda r: _json(200, body))
        result = await client.get(
            "/x",
            parse=lambda payload: PaginatedCollection.from_payload(payload, page=1, limit=10),
        )

        assert isinstance(result.response, PaginatedCollection)
        assert result.response.data == [{"id": 1}]

    @pytest.mark.asyncio
    async def test_parse_error_becomes_unexpected_response(self, make_client) -> None:
        def parse(payload: object) -> object:
            raise ResponseShapeError()

        client = make_client(lambda r: _json(200, {"success": True, "response": "oops"}))
        result = await client.get("/x", parse=parse)

        assert not result.success
        assert result.message == UNEXPECTED_RESPONSE_MESSAGE


class TestSessionExpiry:
    @pytest.mark.asyncio
    async def test_401_clears_then_notifies(
        self, make_client, store: CredentialStore, notifier: SessionExpiryNotifier
    ) -> None:
        observed: list[tuple[str | None, dict | None]] = []

        async def on_expired() -> None:
            observed.append((await store.get_token(), await store.get_profile()))

        notifier.set_session_expired_callback(on_expired)
        await store.set_token("stale")
        await store.set_profile({"id": "p1"})

        result = await make_client(
            lambda r: _json(401, {"success": False, "message": "Token expired"})
        ).get("/delivery-partner/auth/me")

        assert not result.success
        assert result.message == SESSION_EXPIRED_MESSAGE
        assert await store.get_token() is None
        assert observed == [(None, None)]

    @pytest.mark.asyncio
    async def test_401_with_html_body_still_expires(self, make_client, store) -> None:
        await store.set_token("stale")
        result = await make_client(lambda r: httpx.Response(401, text="Unauthorized")).get("/x")

        assert result.message == SESSION_EXPIRED_MESSAGE
        assert await store.get_token() is None

    @pytest.mark.asyncio
    async def test_401_without_callback_does_not_raise(self, make_client, store) -> None:
        await store.set_token("stale")
        result = await make_client(lambda r: _json(401, {})).get("/x")
        assert not result.success

    @pytest.mark.asyncio
    async def test_failing_callback_does_not_escape(
        self, make_client, notifier: SessionExpiryNotifier
    ) -> None:
        def explode() -> None:
            raise RuntimeError("navigation not ready")

        notifier.set_session_expired_callback(explode)
        result = await make_client(lambda r: _json(401, {})).get("/x")

        assert result.message == SESSION_EXPIRED_MESSAGE


class TestLogging:
    @pytest.mark.asyncio
    async def test_token_is_never_logged(self, make_client, store, caplog) -> None:
        caplog.set_level("DEBUG")
        await store.set_token("super-secret-jwt")
        await make_client(lambda r: _json(200, {"success": True})).get("/auth/me")

        assert "super-secret-jwt" not in caplog.text
        records = [r for r in caplog.records if r.name == "bhaojan_client.transport.client"]
        assert records[-1].endpoint == "/auth/me"
        assert records[-1].status_code == 200


class TestUnreadableStorage:
    @pytest.mark.asyncio
    async def test_non_utf8_credentials_file_sends_anonymous_request(
        self, tmp_path, partner_profile
    ) -> None:
        path = tmp_path / "credentials.json"
        path.write_bytes(b'{"partnerToken": "\xff\xfe"}')
        store = CredentialStore.for_app(partner_profile, JsonFileBackend(path))
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return _json(200, {"success": True, "response": None})

        async with ApiClient(TEST_BASE_URL, store, transport=httpx.MockTransport(handler)) as client:
            result = await client.get("/x")

        assert result.success
        assert "Authorization" not in seen[0].headers

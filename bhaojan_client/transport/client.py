"""Authenticated HTTP client for the Bhaojan REST API.

Every network call made by the domain API modules goes through
ApiClient.request(), which attaches the bearer token from the credential
store, parses the JSON envelope and maps every failure (transport errors,
non-JSON bodies, non-2xx statuses) onto a failure envelope. It never raises.

An HTTP 401 means the server no longer accepts the session: credentials are
cleared first and the session-expiry notifier is called second, so whatever
the notifier does (typically a redirect to the login screen) already sees a
logged-out store.

No retry or backoff is performed; a failed call is retried by the user
repeating the action.

SECURITY: Never logs tokens, request bodies or response bodies.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any, Callable, Mapping

import httpx
from pydantic import ValidationError

from bhaojan_client.errors import (
    GENERIC_ERROR_MESSAGE,
    NETWORK_ERROR_MESSAGE,
    SESSION_EXPIRED_MESSAGE,
    UNEXPECTED_RESPONSE_MESSAGE,
    ResponseShapeError,
    status_error_message,
)
from bhaojan_client.models.envelope import ApiEnvelope
from bhaojan_client.session.notifier import SessionExpiryNotifier
from bhaojan_client.storage.credential_store import CredentialStore

logger = logging.getLogger(__name__)

ResponseParser = Callable[[Any], Any]


class ApiClient:
    """Single chokepoint for requests against one app's base URL.

    Parameters
    ----------
    base_url:
        API origin including the ``/api`` prefix
        (e.g. "https://bhaojan-server.vercel.app/api").
    store:
        Credential store the bearer token is read from and cleared on 401.
    notifier:
        Session-expiry notifier invoked after a 401 has cleared credentials.
    timeout_seconds:
        httpx timeout applied to every request (default 30).
    transport:
        Optional httpx transport, used to point the client at an in-process
        app or a mock.
    app_name:
        Included in log entries to tell the apps apart.
    """

    def __init__(
        self,
        base_url: str,
        store: CredentialStore,
        notifier: SessionExpiryNotifier | None = None,
        *,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
        app_name: str = "bhaojan",
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._store = store
        self._notifier = notifier or SessionExpiryNotifier()
        self._app_name = app_name
        self._http = httpx.AsyncClient(timeout=timeout_seconds, transport=transport)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def store(self) -> CredentialStore:
        return self._store

    @property
    def notifier(self) -> SessionExpiryNotifier:
        return self._notifier

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Request wrapper
    # ------------------------------------------------------------------
    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        *,
        json: Any = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        parse: ResponseParser | None = None,
    ) -> ApiEnvelope[Any]:
        """Send a request and return the response envelope.

        Parameters
        ----------
        endpoint:
            Path relative to the base URL, starting with "/".
        method:
            HTTP method.
        json:
            JSON-serialisable request body.
        params:
            Query parameters; entries whose value is None are dropped.
        headers:
            Extra headers. Authorization is always taken from the store.
        parse:
            Maps a successful ``response`` payload to a typed value. If it
            raises ResponseShapeError or a pydantic ValidationError the call
            yields a failure envelope.
        """
        method = method.upper()
        request_id = str(uuid.uuid4())
        log_extra: dict[str, Any] = {
            "request_id": request_id,
            "app": self._app_name,
            "method": method,
            "endpoint": endpoint,
        }

        request_headers = httpx.Headers({"Content-Type": "application/json"})
        if headers:
            request_headers.update(headers)
        request_headers["X-Request-ID"] = request_id
        request_headers.pop("Authorization", None)

        token = await self._store.get_token()
        if token:
            request_headers["Authorization"] = f"Bearer {token}"

        query = {k: v for k, v in (params or {}).items() if v is not None}

        started = time.monotonic()
        try:
            response = await self._http.request(
                method,
                f"{self._base_url}{endpoint}",
                json=json,
                params=query or None,
                headers=request_headers,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning(
                "API %s %s failed before a response was received",
                method,
                endpoint,
                extra={**log_extra, "error_reason": type(exc).__name__},
            )
            return ApiEnvelope.failure(NETWORK_ERROR_MESSAGE)

        log_extra["status_code"] = response.status_code
        log_extra["duration_ms"] = round((time.monotonic() - started) * 1000, 1)

        if response.status_code == 401:
            logger.warning("API %s %s -> 401, session expired", method, endpoint, extra=log_extra)
            await self._expire_session()
            return ApiEnvelope.failure(SESSION_EXPIRED_MESSAGE)

        try:
            data = response.json()
        except ValueError:
            logger.error(
                "API %s %s -> %d with a non-JSON body (%d bytes)",
                method,
                endpoint,
                response.status_code,
                len(response.content),
                extra=log_extra,
            )
            return ApiEnvelope.failure(status_error_message(response.status_code))

        if not response.is_success:
            message = data.get("message") if isinstance(data, dict) else None
            if not isinstance(message, str) or not message:
                message = GENERIC_ERROR_MESSAGE
            logger.info(
                "API %s %s -> %d",
                method,
                endpoint,
                response.status_code,
                extra={**log_extra, "error_reason": message},
            )
            return ApiEnvelope.failure(message)

        envelope = self._parse_envelope(data, response.status_code, parse, log_extra)
        logger.info(
            "API %s %s -> %d (%s)",
            method,
            endpoint,
            response.status_code,
            "success" if envelope.success else "failure",
            extra=log_extra,
        )
        return envelope

    async def get(self, endpoint: str, **kwargs: Any) -> ApiEnvelope[Any]:
        return await self.request(endpoint, "GET", **kwargs)

    async def post(self, endpoint: str, **kwargs: Any) -> ApiEnvelope[Any]:
        return await self.request(endpoint, "POST", **kwargs)

    async def put(self, endpoint: str, **kwargs: Any) -> ApiEnvelope[Any]:
        return await self.request(endpoint, "PUT", **kwargs)

    async def patch(self, endpoint: str, **kwargs: Any) -> ApiEnvelope[Any]:
        return await self.request(endpoint, "PATCH", **kwargs)

    async def delete(self, endpoint: str, **kwargs: Any) -> ApiEnvelope[Any]:
        return await self.request(endpoint, "DELETE", **kwargs)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    async def _expire_session(self) -> None:
        """Clear credentials, then tell the UI layer. Order matters."""
        await self._store.clear_all()
        await self._notifier.notify()

    @staticmethod
    def _parse_envelope(
        data: Any,
        status_code: int,
        parse: ResponseParser | None,
        log_extra: dict[str, Any],
    ) -> ApiEnvelope[Any]:
        if not isinstance(data, dict) or not isinstance(data.get("success"), bool):
            logger.error("Response body is not an API envelope", extra=log_extra)
            return ApiEnvelope.failure(status_error_message(status_code))

        try:
            envelope = ApiEnvelope[Any].model_validate(data)
        except ValidationError:
            logger.error("Response envelope failed validation", extra=log_extra)
            return ApiEnvelope.failure(status_error_message(status_code))

        if not envelope.success or parse is None:
            return envelope

        try:
            payload = parse(envelope.response)
        except (ResponseShapeError, ValidationError) as exc:
            logger.error(
                "Response payload has an unexpected shape",
                extra={**log_extra, "error_reason": str(exc)},
            )
            return ApiEnvelope.failure(UNEXPECTED_RESPONSE_MESSAGE)
        return ApiEnvelope[Any](success=True, message=envelope.message, response=payload)

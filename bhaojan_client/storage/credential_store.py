"""Persistent credential store.

Holds exactly two values per app, the bearer token and the last known
profile snapshot, on top of a KeyValueBackend. The ``read_*``/``write_*``
methods return a StorageResult so callers can see backend failures; the
``get_*``/``set_*`` conveniences are total and degrade failures to "absent"
(reads) or a logged warning (writes).

Token and profile are trusted only together: a stored profile without a
token reads as None.

SECURITY: Never logs the token or profile contents.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Mapping

from pydantic import BaseModel

from bhaojan_client.config.app_profiles import AppProfile
from bhaojan_client.errors import StorageError
from bhaojan_client.storage.backends import KeyValueBackend
from bhaojan_client.storage.result import StorageResult

logger = logging.getLogger(__name__)

_BACKEND_ERRORS = (StorageError, OSError)


class SessionKeyRegistry:
    """Explicit set of session-scoped storage keys.

    Features that cache per-session data under keys outside the app's clear
    prefixes register them here so logout and session expiry remove them.
    """

    def __init__(self, keys: Iterable[str] = ()) -> None:
        self._keys: set[str] = set(keys)

    def register(self, key: str) -> None:
        self._keys.add(key)

    def keys(self) -> list[str]:
        return sorted(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._keys


class CredentialStore:
    """Token + profile snapshot persistence for one client app.

    Parameters
    ----------
    backend:
        Key/value storage the values are written to.
    token_key, profile_key:
        Storage keys for the bearer token and the JSON profile snapshot.
    clear_prefixes:
        Any stored key starting with one of these is removed by clear_all().
    registry:
        Additional session-scoped keys removed by clear_all().
    """

    def __init__(
        self,
        backend: KeyValueBackend,
        token_key: str,
        profile_key: str,
        clear_prefixes: Iterable[str] = (),
        registry: SessionKeyRegistry | None = None,
    ) -> None:
        self._backend = backend
        self.token_key = token_key
        self.profile_key = profile_key
        self.clear_prefixes = tuple(clear_prefixes)
        self.registry = registry or SessionKeyRegistry()

    @classmethod
    def for_app(cls, profile: AppProfile, backend: KeyValueBackend) -> "CredentialStore":
        return cls(
            backend,
            token_key=profile.token_key,
            profile_key=profile.profile_key,
            clear_prefixes=profile.clear_prefixes,
            registry=SessionKeyRegistry(profile.session_keys),
        )

    # ------------------------------------------------------------------
    # Result-returning operations
    # ------------------------------------------------------------------
    async def read_token(self) -> StorageResult[str]:
        try:
            token = await self._backend.get(self.token_key)
        except _BACKEND_ERRORS as exc:
            return StorageResult.failure(str(exc))
        return StorageResult.success(token or None)

    async def write_token(self, token: str) -> StorageResult[None]:
        try:
            await self._backend.set(self.token_key, token)
        except _BACKEND_ERRORS as exc:
            return StorageResult.failure(str(exc))
        return StorageResult.success()

    async def read_profile(self) -> StorageResult[dict]:
        try:
            raw = await self._backend.get(self.profile_key)
        except _BACKEND_ERRORS as exc:
            return StorageResult.failure(str(exc))
        if raw is None:
            return StorageResult.success(None)
        try:
            profile = json.loads(raw)
        except json.JSONDecodeError as exc:
            return StorageResult.failure(f"Stored profile is not valid JSON: {exc.msg}")
        if not isinstance(profile, dict):
            return StorageResult.failure("Stored profile is not a JSON object")
        return StorageResult.success(profile)

    async def write_profile(self, profile: Mapping[str, Any] | BaseModel) -> StorageResult[None]:
        if isinstance(profile, BaseModel):
            profile = profile.model_dump(by_alias=True, mode="json")
        try:
            payload = json.dumps(dict(profile), default=str)
        except (TypeError, ValueError) as exc:
            return StorageResult.failure(f"Profile is not JSON-serialisable: {exc}")
        try:
            await self._backend.set(self.profile_key, payload)
        except _BACKEND_ERRORS as exc:
            return StorageResult.failure(str(exc))
        return StorageResult.success()

    async def clear(self) -> StorageResult[list[str]]:
        """Remove every session key; keeps going past individual failures."""
        targets = [self.token_key, self.profile_key, *self.registry.keys()]
        errors: list[str] = []

        try:
            stored = await self._backend.keys()
        except _BACKEND_ERRORS as exc:
            errors.append(str(exc))
            stored = []
        for key in stored:
            if key not in targets and key.startswith(self.clear_prefixes):
                targets.append(key)

        removed: list[str] = []
        for key in targets:
            try:
                await self._backend.remove(key)
            except _BACKEND_ERRORS as exc:
                errors.append(f"{key}: {exc}")
                continue
            removed.append(key)

        if errors:
            return StorageResult.failure("; ".join(errors))
        return StorageResult.success(removed)

    # ------------------------------------------------------------------
    # Total conveniences
    # ------------------------------------------------------------------
    async def get_token(self) -> str | None:
        result = await self.read_token()
        if not result.ok:
            logger.warning("Failed to read token: %s", result.error)
        return result.unwrap_or(None)

    async def set_token(self, token: str) -> None:
        result = await self.write_token(token)
        if not result.ok:
            logger.error("Failed to store token: %s", result.error)

    async def get_profile(self) -> dict | None:
        if await self.get_token() is None:
            return None
        result = await self.read_profile()
        if not result.ok:
            logger.warning("Failed to read profile: %s", result.error)
        return result.unwrap_or(None)

    async def set_profile(self, profile: Mapping[str, Any] | BaseModel) -> None:
        result = await self.write_profile(profile)
        if not result.ok:
            logger.error("Failed to store profile: %s", result.error)

    async def merge_profile(self, fields: Mapping[str, Any]) -> None:
        """Shallow-merge ``fields`` into the stored profile, if there is one."""
        current = (await self.read_profile()).unwrap_or(None)
        if current is None:
            return
        current.update(fields)
        await self.set_profile(current)

    async def clear_all(self) -> None:
        result = await self.clear()
        if not result.ok:
            logger.error("Failed to clear credentials: %s", result.error)
        else:
            logger.debug("Cleared %d credential keys", len(result.value or []))

    async def is_logged_in(self) -> bool:
        return await self.get_token() is not None

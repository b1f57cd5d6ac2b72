"""Key/value backends for the credential store.

A backend is the Python stand-in for on-device key/value storage: string
keys, string values, plus key enumeration for the logout sweep. Backends
signal I/O failure by raising StorageError and nothing else; the credential
store turns that into a StorageResult.
"""

from __future__ import annotations

import abc
import asyncio
import contextlib
import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from bhaojan_client.errors import StorageError

logger = logging.getLogger(__name__)


class KeyValueBackend(abc.ABC):
    """Async string key/value storage."""

    @abc.abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""

    @abc.abstractmethod
    async def set(self, key: str, value: str) -> None:
        ...

    @abc.abstractmethod
    async def remove(self, key: str) -> None:
        """Delete a key. Removing an absent key is not an error."""

    @abc.abstractmethod
    async def keys(self) -> list[str]:
        ...


class MemoryBackend(KeyValueBackend):
    """In-process backend. Contents are lost when the process exits."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)

    async def keys(self) -> list[str]:
        return list(self._data)


class JsonFileBackend(KeyValueBackend):
    """Persists every key in a single JSON object file.

    Writes go to a uniquely named temporary sibling file which is fsynced and
    then moved over the real file, so a crash mid-write leaves the previous
    contents intact. A file that is not UTF-8 JSON object text reads as
    empty. Every instance pointing at the same path shares one lock, and each
    read-modify-write runs under it in a single worker thread.
    """

    _path_locks: dict[Path, threading.Lock] = {}
    _path_locks_guard = threading.Lock()

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._file_lock = self._lock_for(self.path)

    @classmethod
    def _lock_for(cls, path: Path) -> threading.Lock:
        key = path.absolute()
        with cls._path_locks_guard:
            return cls._path_locks.setdefault(key, threading.Lock())

    # ------------------------------------------------------------------
    # Persistence helpers
    # ------------------------------------------------------------------
    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            raise StorageError(str(exc)) from exc
        if not raw:
            return {}
        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError):
            logger.warning("Credential file %s is corrupt, treating as empty", self.path)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        payload = json.dumps(data, indent=2)
        tmp_path: Path | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=self.path.name + ".",
                suffix=".tmp",
                delete=False,
            ) as fh:
                tmp_path = Path(fh.name)
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise StorageError(str(exc)) from exc
        finally:
            if tmp_path is not None:
                with contextlib.suppress(OSError):
                    tmp_path.unlink(missing_ok=True)

    def _locked_read(self) -> dict[str, str]:
        with self._file_lock:
            return self._read()

    def _locked_update(self, key: str, value: str | None) -> None:
        with self._file_lock:
            data = self._read()
            if value is not None:
                data[key] = value
            elif key in data:
                del data[key]
            else:
                return
            self._write(data)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    async def get(self, key: str) -> str | None:
        data = await asyncio.to_thread(self._locked_read)
        return data.get(key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._locked_update, key, value)

    async def remove(self, key: str) -> None:
        await asyncio.to_thread(self._locked_update, key, None)

    async def keys(self) -> list[str]:
        return list(await asyncio.to_thread(self._locked_read))

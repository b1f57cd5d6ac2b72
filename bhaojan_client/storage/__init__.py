"""Credential persistence: key/value backends and the credential store."""

from bhaojan_client.storage.backends import JsonFileBackend, KeyValueBackend, MemoryBackend
from bhaojan_client.storage.credential_store import CredentialStore, SessionKeyRegistry
from bhaojan_client.storage.result import StorageResult

__all__ = [
    "CredentialStore",
    "JsonFileBackend",
    "KeyValueBackend",
    "MemoryBackend",
    "SessionKeyRegistry",
    "StorageResult",
]

"""Explicit success/failure result for local storage operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class StorageResult(Generic[T]):
    """Outcome of a credential-store operation.

    ``ok`` is False only when the backend failed; a missing key is a
    successful read whose ``value`` is None.
    """

    ok: bool
    value: T | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: T | None = None) -> "StorageResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "StorageResult[T]":
        return cls(ok=False, error=error)

    def unwrap_or(self, default: T | None = None) -> T | None:
        if self.ok and self.value is not None:
            return self.value
        return default

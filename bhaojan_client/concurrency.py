"""Concurrency helpers for screens that drive the API modules.

Key behaviors:
- InFlightGuard.run() refuses to start an action whose key is already
  running (double-tap on "Accept order" sends one request, not two)
- Different keys never block each other
- run_concurrently() fans out independent calls and returns their results
  in argument order (e.g. balance + history on the wallet screen)
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Hashable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InFlightGuard:
    """Keyed guard against re-entrant user actions.

    The check and the reservation of a key happen without an intervening
    await, so two tasks on the same event loop cannot both pass the check.
    """

    def __init__(self) -> None:
        self._in_flight: set[Hashable] = set()

    def is_busy(self, key: Hashable) -> bool:
        return key in self._in_flight

    @property
    def busy_keys(self) -> frozenset[Hashable]:
        return frozenset(self._in_flight)

    async def run(self, key: Hashable, action: Callable[[], Awaitable[T]]) -> T | None:
        """Await ``action()`` unless ``key`` is already in flight.

        Returns None without calling ``action`` when the key is busy. The
        key is released when the action finishes, including when it raises.
        """
        if key in self._in_flight:
            logger.debug("Ignoring %r: already in flight", key)
            return None

        self._in_flight.add(key)
        try:
            return await action()
        finally:
            self._in_flight.discard(key)


async def run_concurrently(*calls: Awaitable[Any] | Callable[[], Awaitable[Any]]) -> list[Any]:
    """Await independent calls together; results keep argument order.

    Accepts awaitables or zero-argument coroutine functions. API module
    calls return failure envelopes instead of raising, so one failed call
    does not hide the results of the others.
    """
    awaitables = [call() if callable(call) else call for call in calls]
    return list(await asyncio.gather(*awaitables))

"""Session-expiry notification.

The request wrapper has no way to navigate; the UI layer does. The UI
registers a single callback on a SessionExpiryNotifier at startup and the
notifier is handed to the ApiClient, which calls notify() after it has
cleared credentials on an HTTP 401.
"""

from __future__ import annotations

import inspect
import logging
from typing import Awaitable, Callable, Union

logger = logging.getLogger(__name__)

SessionExpiredCallback = Callable[[], Union[None, Awaitable[None]]]


class SessionExpiryNotifier:
    """Single-slot holder for the session-expired callback.

    Registering a new callback replaces the previous one. Both plain
    functions and coroutine functions are accepted.
    """

    def __init__(self, callback: SessionExpiredCallback | None = None) -> None:
        self._callback = callback

    @property
    def has_callback(self) -> bool:
        return self._callback is not None

    def set_session_expired_callback(self, callback: SessionExpiredCallback | None) -> None:
        self._callback = callback

    async def notify(self) -> None:
        """Invoke the registered callback; a no-op when none is set.

        Errors raised by the callback are logged, never propagated.
        """
        callback = self._callback
        if callback is None:
            logger.debug("Session expired with no callback registered")
            return
        try:
            outcome = callback()
            if inspect.isawaitable(outcome):
                await outcome
        except Exception:
            logger.exception("Session-expired callback failed")

"""Session lifecycle: expiry notification."""

from bhaojan_client.session.notifier import SessionExpiredCallback, SessionExpiryNotifier

__all__ = ["SessionExpiredCallback", "SessionExpiryNotifier"]

"""Client error hierarchy and the generic envelope messages.

All client-specific errors extend ClientError. None of them cross the public
API surface: the request wrapper and the credential store translate them into
failure envelopes and StorageResult failures respectively.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Envelope messages synthesized client-side
# ---------------------------------------------------------------------------

SESSION_EXPIRED_MESSAGE = "Session expired. Please log in again."
NETWORK_ERROR_MESSAGE = "Network error. Please check your connection."
SERVER_ERROR_MESSAGE = "Server error. Please try again later."
GENERIC_ERROR_MESSAGE = "Something went wrong"
UNEXPECTED_RESPONSE_MESSAGE = "Unexpected response from server"
INCOMPLETE_OTP_MESSAGE = "Please enter the complete 6-digit OTP"


def status_error_message(status_code: int) -> str:
    """Generic message for a response whose body could not be used."""
    if status_code == 500:
        return SERVER_ERROR_MESSAGE
    return f"Server returned an error ({status_code})"


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class ClientError(Exception):
    """Base error for all client-side failures."""

    message: str = "Client error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class StorageError(ClientError):
    """The key/value backend failed to read or write."""

    message = "Local storage unavailable"


class ResponseShapeError(ClientError):
    """A successful response payload did not have the expected shape."""

    message = UNEXPECTED_RESPONSE_MESSAGE


class ConfigurationError(ClientError):
    """Settings or app profiles are unusable."""

    message = "Invalid client configuration"

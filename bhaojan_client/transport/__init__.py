"""HTTP transport: the authenticated request wrapper."""

from bhaojan_client.transport.client import ApiClient, ResponseParser

__all__ = ["ApiClient", "ResponseParser"]

"""Pydantic Settings for the Bhaojan API clients.

All environment variables use the BHAOJAN_ prefix.
Example: BHAOJAN_LOG_LEVEL=DEBUG, BHAOJAN_STORAGE_PATH=/var/lib/bhaojan/creds.json
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_APP_PROFILES_PATH = str(Path(__file__).with_name("app_profiles.yaml"))


class ClientSettings(BaseSettings):
    """Client configuration validated from environment variables."""

    log_level: str = "INFO"

    # Transport
    request_timeout_seconds: float = Field(default=30.0, gt=0)

    # Credential persistence
    storage_path: str = ".bhaojan/credentials.json"

    # App profiles (base URL, storage keys, clear prefixes per app)
    app_profiles_path: str = DEFAULT_APP_PROFILES_PATH

    # Base URL overrides, applied once when an app is built
    partner_base_url: str | None = None
    customer_base_url: str | None = None
    admin_base_url: str | None = None

    model_config = {"env_prefix": "BHAOJAN_"}

    def base_url_override(self, app_name: str) -> str | None:
        return {
            "delivery_partner": self.partner_base_url,
            "customer": self.customer_base_url,
            "admin": self.admin_base_url,
        }.get(app_name)

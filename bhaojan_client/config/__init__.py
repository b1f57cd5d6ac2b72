"""Configuration module: settings and app profiles."""

from bhaojan_client.config.app_profiles import (
    ADMIN_APP,
    CUSTOMER_APP,
    PARTNER_APP,
    AppProfile,
    default_profiles,
    load_app_profiles,
)
from bhaojan_client.config.settings import ClientSettings

__all__ = [
    "ADMIN_APP",
    "CUSTOMER_APP",
    "PARTNER_APP",
    "AppProfile",
    "ClientSettings",
    "default_profiles",
    "load_app_profiles",
]

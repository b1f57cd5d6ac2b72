"""App profile models and YAML loader.

Each client app (delivery partner, customer, admin dashboard) talks to a
fixed base URL and keeps its credentials under its own storage keys. This
module provides typed Pydantic models for those per-app settings and a loader
that parses the YAML config into them.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

PARTNER_APP = "delivery_partner"
CUSTOMER_APP = "customer"
ADMIN_APP = "admin"


class AppProfile(BaseModel):
    """Base URL and credential-store layout for a single client app."""

    name: str = Field(..., min_length=1)
    base_url: str = Field(..., min_length=1)
    token_key: str = Field(..., min_length=1)
    profile_key: str = Field(..., min_length=1)
    clear_prefixes: list[str] = []
    session_keys: list[str] = []


_DEFAULT_PROFILES: dict[str, AppProfile] = {
    PARTNER_APP: AppProfile(
        name=PARTNER_APP,
        base_url="https://bhaojan-server.vercel.app/api",
        token_key="partnerToken",
        profile_key="partnerData",
        clear_prefixes=["partner", "delivery", "theme"],
    ),
    CUSTOMER_APP: AppProfile(
        name=CUSTOMER_APP,
        base_url="https://bhaojan-server.vercel.app/api",
        token_key="auth_token",
        profile_key="auth_user",
        clear_prefixes=["auth_", "user_", "@app_theme"],
    ),
    ADMIN_APP: AppProfile(
        name=ADMIN_APP,
        base_url="http://localhost:5000/api",
        token_key="admin_token",
        profile_key="admin_user",
        clear_prefixes=["admin_"],
    ),
}


def default_profiles() -> dict[str, AppProfile]:
    return {name: profile.model_copy(deep=True) for name, profile in _DEFAULT_PROFILES.items()}


def load_app_profiles(yaml_path: str) -> dict[str, AppProfile]:
    """Parse an app profiles YAML file into typed AppProfile objects.

    Args:
        yaml_path: Path to the YAML configuration file.

    Returns:
        A dict mapping app names to AppProfile instances. Apps missing from
        the file (or the whole file, if unreadable) fall back to the built-in
        defaults.
    """
    profiles = default_profiles()
    path = Path(yaml_path)

    if not path.exists():
        logger.warning("App profiles file not found at %s, using built-in defaults", yaml_path)
        return profiles

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        logger.error("Failed to parse app profiles YAML at %s: %s", yaml_path, exc)
        return profiles

    if not isinstance(raw, dict) or not isinstance(raw.get("apps"), dict):
        logger.warning("App profiles YAML missing 'apps' key, using built-in defaults")
        return profiles

    for name, config in raw["apps"].items():
        if not isinstance(config, dict):
            logger.error("Invalid profile for app '%s': expected a mapping, skipping", name)
            continue
        try:
            profiles[name] = AppProfile.model_validate({"name": name, **config})
        except ValidationError as exc:
            logger.error("Invalid profile for app '%s': %s, skipping", name, exc)

    return profiles

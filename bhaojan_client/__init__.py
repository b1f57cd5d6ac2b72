"""Async client for the Bhaojan delivery partner, customer and admin APIs."""

from bhaojan_client.apps import (
    AdminApp,
    CustomerApp,
    PartnerApp,
    build_admin_app,
    build_customer_app,
    build_partner_app,
)
from bhaojan_client.config import ClientSettings
from bhaojan_client.models import ApiEnvelope, PaginatedCollection

__all__ = [
    "AdminApp",
    "ApiEnvelope",
    "ClientSettings",
    "CustomerApp",
    "PaginatedCollection",
    "PartnerApp",
    "build_admin_app",
    "build_customer_app",
    "build_partner_app",
]

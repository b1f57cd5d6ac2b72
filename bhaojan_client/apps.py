"""Ready-wired clients for the three Bhaojan apps.

Each build_* factory performs the startup sequence once:
load settings, load app profiles, apply base URL overrides, open the
credential backend, and wire one CredentialStore, one SessionExpiryNotifier
and one ApiClient shared by all of the app's API modules.

Example
-------
    settings = ClientSettings()
    configure_logging(settings.log_level)
    app = build_partner_app(settings, on_session_expired=show_login)
    async with app:
        await app.auth.login("9876543210")
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from bhaojan_client.api import (
    AddressesApi,
    AdminAuthApi,
    AdminBannersApi,
    AdminCategoriesApi,
    AdminEventsApi,
    AdminStatsApi,
    AdminUsersApi,
    AdminVendorsApi,
    BannersApi,
    CategoriesApi,
    CouponsApi,
    CustomerAuthApi,
    NotificationsApi,
    OrdersApi,
    PartnerAuthApi,
    PartnerEarningsApi,
    PartnerOrdersApi,
    PartnerWalletApi,
    ProductsApi,
    ReviewsApi,
    VendorApi,
    WalletApi,
)
from bhaojan_client.config import (
    ADMIN_APP,
    CUSTOMER_APP,
    PARTNER_APP,
    AppProfile,
    ClientSettings,
    load_app_profiles,
)
from bhaojan_client.errors import ConfigurationError
from bhaojan_client.flows.delivery import DeliveryHandoff
from bhaojan_client.models.profiles import AdminProfile, CustomerProfile, PartnerProfile
from bhaojan_client.session.notifier import SessionExpiredCallback, SessionExpiryNotifier
from bhaojan_client.storage.backends import JsonFileBackend, KeyValueBackend
from bhaojan_client.storage.credential_store import CredentialStore
from bhaojan_client.transport.client import ApiClient

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=BaseModel)


class _AppBundle(Generic[P]):
    """Store, notifier and HTTP client shared by one app's API modules."""

    profile_model: type[P]

    def __init__(self, profile: AppProfile, client: ApiClient) -> None:
        self.app_profile = profile
        self.client = client

    @property
    def store(self) -> CredentialStore:
        return self.client.store

    @property
    def notifier(self) -> SessionExpiryNotifier:
        return self.client.notifier

    def on_session_expired(self, callback: SessionExpiredCallback | None) -> None:
        self.notifier.set_session_expired_callback(callback)

    async def is_logged_in(self) -> bool:
        return await self.store.is_logged_in()

    async def profile(self) -> P | None:
        """Typed view of the stored profile snapshot, or None."""
        snapshot = await self.store.get_profile()
        if snapshot is None:
            return None
        try:
            return self.profile_model.model_validate(snapshot)
        except ValidationError as exc:
            logger.warning(
                "Stored %s profile does not match %s: %d error(s)",
                self.app_profile.name,
                self.profile_model.__name__,
                exc.error_count(),
            )
            return None

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "_AppBundle[P]":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


class PartnerApp(_AppBundle[PartnerProfile]):
    profile_model = PartnerProfile

    def __init__(self, profile: AppProfile, client: ApiClient) -> None:
        super().__init__(profile, client)
        self.auth = PartnerAuthApi(client)
        self.orders = PartnerOrdersApi(client)
        self.earnings = PartnerEarningsApi(client)
        self.wallet = PartnerWalletApi(client)

    def handoff(self, order_id: str) -> DeliveryHandoff:
        return DeliveryHandoff(self.orders, order_id)


class CustomerApp(_AppBundle[CustomerProfile]):
    profile_model = CustomerProfile

    def __init__(self, profile: AppProfile, client: ApiClient) -> None:
        super().__init__(profile, client)
        self.auth = CustomerAuthApi(client)
        self.products = ProductsApi(client)
        self.categories = CategoriesApi(client)
        self.banners = BannersApi(client)
        self.orders = OrdersApi(client)
        self.addresses = AddressesApi(client)
        self.coupons = CouponsApi(client)
        self.notifications = NotificationsApi(client)
        self.reviews = ReviewsApi(client)
        self.vendor = VendorApi(client)
        self.wallet = WalletApi(client)


class AdminApp(_AppBundle[AdminProfile]):
    profile_model = AdminProfile

    def __init__(self, profile: AppProfile, client: ApiClient) -> None:
        super().__init__(profile, client)
        self.auth = AdminAuthApi(client)
        self.users = AdminUsersApi(client)
        self.vendors = AdminVendorsApi(client)
        self.categories = AdminCategoriesApi(client)
        self.banners = AdminBannersApi(client)
        self.events = AdminEventsApi(client)
        self.stats = AdminStatsApi(client)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def resolve_profile(app_name: str, settings: ClientSettings) -> AppProfile:
    """Load the named app profile and apply any base URL override.

    Raises
    ------
    ConfigurationError
        If no profile exists for ``app_name``.
    """
    profiles = load_app_profiles(settings.app_profiles_path)
    profile = profiles.get(app_name)
    if profile is None:
        raise ConfigurationError(f"No app profile named '{app_name}'", app=app_name)

    override = settings.base_url_override(app_name)
    if override:
        logger.info("Using base URL override for %s", app_name)
        profile = profile.model_copy(update={"base_url": override})
    return profile


def _build_client(
    app_name: str,
    settings: ClientSettings | None,
    backend: KeyValueBackend | None,
    on_session_expired: SessionExpiredCallback | None,
    transport: httpx.AsyncBaseTransport | None,
) -> tuple[AppProfile, ApiClient]:
    settings = settings or ClientSettings()
    profile = resolve_profile(app_name, settings)
    store = CredentialStore.for_app(profile, backend or JsonFileBackend(settings.storage_path))
    client = ApiClient(
        profile.base_url,
        store,
        SessionExpiryNotifier(on_session_expired),
        timeout_seconds=settings.request_timeout_seconds,
        transport=transport,
        app_name=profile.name,
    )
    logger.info("Built %s client for %s", profile.name, profile.base_url)
    return profile, client


def build_partner_app(
    settings: ClientSettings | None = None,
    backend: KeyValueBackend | None = None,
    on_session_expired: SessionExpiredCallback | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PartnerApp:
    return PartnerApp(
        *_build_client(PARTNER_APP, settings, backend, on_session_expired, transport)
    )


def build_customer_app(
    settings: ClientSettings | None = None,
    backend: KeyValueBackend | None = None,
    on_session_expired: SessionExpiredCallback | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> CustomerApp:
    return CustomerApp(
        *_build_client(CUSTOMER_APP, settings, backend, on_session_expired, transport)
    )


def build_admin_app(
    settings: ClientSettings | None = None,
    backend: KeyValueBackend | None = None,
    on_session_expired: SessionExpiredCallback | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AdminApp:
    return AdminApp(*_build_client(ADMIN_APP, settings, backend, on_session_expired, transport))

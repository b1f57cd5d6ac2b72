from bhaojan_client.api.addresses import AddressesApi
from bhaojan_client.api.admin_auth import AdminAuthApi
from bhaojan_client.api.admin_catalog import AdminBannersApi, AdminCategoriesApi, AdminEventsApi
from bhaojan_client.api.admin_stats import AdminStatsApi
from bhaojan_client.api.admin_users import AdminUsersApi, AdminVendorsApi
from bhaojan_client.api.base import DEFAULT_PAGE_SIZE, ApiModule
from bhaojan_client.api.catalog import BannersApi, CategoriesApi, ProductsApi
from bhaojan_client.api.customer_auth import CustomerAuthApi
from bhaojan_client.api.earnings import PartnerEarningsApi
from bhaojan_client.api.notifications import NotificationsApi
from bhaojan_client.api.orders import CouponsApi, OrdersApi
from bhaojan_client.api.partner_auth import PartnerAuthApi
from bhaojan_client.api.partner_orders import PartnerOrdersApi
from bhaojan_client.api.reviews import ReviewsApi
from bhaojan_client.api.vendor import VendorApi
from bhaojan_client.api.wallet import WALLET_PAGE_SIZE, PartnerWalletApi, WalletApi

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "WALLET_PAGE_SIZE",
    "AddressesApi",
    "AdminAuthApi",
    "AdminBannersApi",
    "AdminCategoriesApi",
    "AdminEventsApi",
    "AdminStatsApi",
    "AdminUsersApi",
    "AdminVendorsApi",
    "ApiModule",
    "BannersApi",
    "CategoriesApi",
    "CouponsApi",
    "CustomerAuthApi",
    "NotificationsApi",
    "OrdersApi",
    "PartnerAuthApi",
    "PartnerEarningsApi",
    "PartnerOrdersApi",
    "PartnerWalletApi",
    "ProductsApi",
    "ReviewsApi",
    "VendorApi",
    "WalletApi",
]

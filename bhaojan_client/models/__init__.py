"""Public models for the Bhaojan API clients."""

from bhaojan_client.models.envelope import ApiEnvelope, PaginatedCollection
from bhaojan_client.models.profiles import (
    AdminProfile,
    CustomerProfile,
    PartnerProfile,
    PartnerStats,
    Vehicle,
)
from bhaojan_client.models.requests import (
    AddressInput,
    AddressType,
    AnalyticsFilter,
    BannerInput,
    BannerOrder,
    CategoryInput,
    CustomerProfileUpdate,
    CustomerRegistration,
    EventUpdate,
    KycDecision,
    KycStatus,
    NotificationSettingsUpdate,
    OrderCreate,
    OrderLine,
    PartnerProfileUpdate,
    PartnerVehicleSetup,
    PaymentDetails,
    PaymentMethod,
    ProductInput,
    RequestBody,
    ReviewCreate,
    ShippingAddress,
    VehicleType,
    WithdrawalRequest,
)

__all__ = [
    "AddressInput",
    "AddressType",
    "AdminProfile",
    "AnalyticsFilter",
    "ApiEnvelope",
    "BannerInput",
    "BannerOrder",
    "CategoryInput",
    "CustomerProfile",
    "CustomerProfileUpdate",
    "CustomerRegistration",
    "EventUpdate",
    "KycDecision",
    "KycStatus",
    "NotificationSettingsUpdate",
    "OrderCreate",
    "OrderLine",
    "PaginatedCollection",
    "PartnerProfile",
    "PartnerProfileUpdate",
    "PartnerStats",
    "PartnerVehicleSetup",
    "PaymentDetails",
    "PaymentMethod",
    "ProductInput",
    "RequestBody",
    "ReviewCreate",
    "ShippingAddress",
    "Vehicle",
    "VehicleType",
    "WithdrawalRequest",
]

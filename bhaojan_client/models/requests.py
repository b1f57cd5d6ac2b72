"""Pydantic request body models for the Bhaojan endpoints.

Field names are snake_case in Python and serialised camelCase on the wire.
Unset optional fields are omitted so that partial updates only touch the
fields the caller supplied.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RequestBody(BaseModel):
    """Base for every JSON request body."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# ---------------------------------------------------------------------------
# Delivery partner
# ---------------------------------------------------------------------------


class VehicleType(str, Enum):
    """Vehicle kinds accepted during partner onboarding."""

    BIKE = "bike"
    SCOOTER = "scooter"
    BICYCLE = "bicycle"
    CAR = "car"


class PartnerVehicleSetup(RequestBody):
    """Body for /delivery-partner/auth/complete-profile."""

    partner_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    vehicle_type: VehicleType
    vehicle_number: str = Field(..., min_length=1)
    vehicle_model: str | None = None
    vehicle_color: str | None = None


class PartnerProfileUpdate(RequestBody):
    name: str | None = None
    avatar: str | None = None
    vehicle_type: VehicleType | None = None
    vehicle_number: str | None = None
    vehicle_model: str | None = None
    vehicle_color: str | None = None


class PaymentMethod(str, Enum):
    UPI = "upi"
    BANK = "bank"


class WithdrawalRequest(RequestBody):
    """Body for wallet withdrawals (partner and vendor wallets)."""

    amount: float = Field(..., gt=0)
    payment_method: PaymentMethod | None = None
    upi_id: str | None = None
    account_holder_name: str | None = None
    account_number: str | None = None
    ifsc_code: str | None = None
    bank_name: str | None = None
    mobile_number: str | None = None
    account_details: str | None = None


# ---------------------------------------------------------------------------
# Customer / vendor
# ---------------------------------------------------------------------------


class CustomerRegistration(RequestBody):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: str = Field(..., min_length=10)
    avatar: str | None = None


class CustomerProfileUpdate(RequestBody):
    name: str | None = None
    email: str | None = None
    avatar: str | None = None


class NotificationSettingsUpdate(RequestBody):
    push_enabled: bool | None = None
    order_updates: bool | None = None
    promotions: bool | None = None


class AddressType(str, Enum):
    HOME = "Home"
    OFFICE = "Office"
    OTHER = "Other"


class AddressInput(RequestBody):
    type: AddressType = AddressType.HOME
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=10)
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str | None = None
    pincode: str = Field(..., min_length=6, max_length=6)
    is_default: bool | None = None


class ShippingAddress(RequestBody):
    name: str
    phone: str
    address: str
    city: str
    state: str
    pincode: str


class OrderLine(RequestBody):
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(default=1, ge=1)


class PaymentDetails(RequestBody):
    upi_id: str | None = None
    card_last4: str | None = None
    wallet_name: str | None = None


class OrderCreate(RequestBody):
    items: list[OrderLine] = Field(..., min_length=1)
    shipping_address: ShippingAddress
    payment_method: str = Field(..., min_length=1)
    payment_details: PaymentDetails | None = None
    promo_code: str | None = None


class ReviewCreate(RequestBody):
    product_id: str = Field(..., min_length=1)
    order_id: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)
    comment: str | None = None
    images: list[str] | None = None
    delivery_rating: int | None = Field(default=None, ge=1, le=5)


class ProductInput(RequestBody):
    """Create/update body for products (vendor and catalogue endpoints)."""

    title: str | None = None
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    mrp: float | None = Field(default=None, ge=0)
    category: str | None = None
    image: str | None = None
    images: list[str] | None = None
    badge: str | None = None
    location: str | None = None
    full_location: str | None = None
    date: str | None = None
    time: str | None = None
    services: list[str] | None = None


# ---------------------------------------------------------------------------
# Admin dashboard
# ---------------------------------------------------------------------------


class CategoryInput(RequestBody):
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    image: str | None = None
    color: str | None = None
    is_active: bool | None = None
    order: int | None = None


class BannerInput(RequestBody):
    title: str | None = None
    subtitle: str | None = None
    image: str | None = None
    badge: str | None = None
    gradient: list[str] | None = None
    link_type: str | None = None
    link_value: str | None = None
    is_active: bool | None = None
    order: int | None = None


class BannerOrder(RequestBody):
    id: str = Field(..., min_length=1)
    order: int = Field(..., ge=0)


class EventUpdate(RequestBody):
    title: str | None = None
    description: str | None = None
    category: str | None = None
    image: str | None = None
    location: str | None = None
    full_location: str | None = None
    price: float | None = Field(default=None, ge=0)
    mrp: float | None = Field(default=None, ge=0)
    capacity: int | None = Field(default=None, ge=0)
    is_featured: bool | None = None
    is_active: bool | None = None


class KycStatus(str, Enum):
    VERIFIED = "verified"
    REJECTED = "rejected"


class KycDecision(RequestBody):
    status: KycStatus
    rejection_reason: str | None = None


class AnalyticsFilter(str, Enum):
    TODAY = "today"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

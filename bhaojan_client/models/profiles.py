"""Profile snapshot models.

A snapshot is the last profile the server returned for the signed-in
account. The credential store keeps it as plain JSON; these models give the
UI layer typed access to it. Unknown fields are kept so that newer server
fields survive a store round trip.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Snapshot(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class Vehicle(_Snapshot):
    type: str | None = None
    number: str | None = None
    model: str | None = None
    color: str | None = None


class PartnerStats(_Snapshot):
    total_deliveries: int = 0
    rating: float = 5.0


class PartnerProfile(_Snapshot):
    """Delivery partner record as returned by /delivery-partner/auth/*."""

    id: str
    name: str | None = None
    phone: str
    avatar: str | None = None
    vehicle: Vehicle | None = None
    is_profile_complete: bool = False
    is_verified: bool = False
    is_online: bool = False
    is_blocked: bool = False
    stats: PartnerStats | None = None
    earnings: dict | None = None
    member_since: str | None = None

    @property
    def kyc_pending(self) -> bool:
        """KYC gate: a partner cannot take orders until verified."""
        return not self.is_verified


class CustomerProfile(_Snapshot):
    """Customer (or vendor) record as returned by /auth/*."""

    id: str
    name: str | None = None
    email: str | None = None
    phone: str
    avatar: str | None = None
    is_blocked: bool = False
    member_since: str | None = None


class AdminProfile(_Snapshot):
    """Dashboard administrator as returned by /admin/login and /admin/me."""

    id: str = Field(alias="_id")
    name: str | None = None
    email: str
    avatar: str | None = None
    role: str | None = None

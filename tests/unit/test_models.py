"""Unit tests for the envelope, pagination, profile and request models."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from bhaojan_client.errors import ResponseShapeError
from bhaojan_client.models import (
    AdminProfile,
    ApiEnvelope,
    CategoryInput,
    PaginatedCollection,
    PartnerProfile,
    PartnerProfileUpdate,
    WithdrawalRequest,
)


# ---------------------------------------------------------------------------
# ApiEnvelope
# ---------------------------------------------------------------------------


class TestApiEnvelope:
    def test_parses_server_envelope(self) -> None:
        envelope = ApiEnvelope[Any].model_validate(
            {"success": True, "message": "Login successful", "response": {"token": "t"}}
        )
        assert envelope.success
        assert envelope.response == {"token": "t"}

    def test_failure_never_carries_response(self) -> None:
        envelope = ApiEnvelope[Any].model_validate(
            {"success": False, "message": "Nope", "response": {"leak": True}}
        )
        assert envelope.response is None

    def test_unknown_keys_ignored(self) -> None:
        envelope = ApiEnvelope[Any].model_validate({"success": True, "count": 3})
        assert envelope.message is None

    def test_failure_helper(self) -> None:
        envelope = ApiEnvelope.failure("Network error")
        assert envelope.model_dump() == {
            "success": False,
            "message": "Network error",
            "response": None,
        }

    def test_missing_success_is_invalid(self) -> None:
        with pytest.raises(ValidationError):
            ApiEnvelope[Any].model_validate({"message": "hi"})


# ---------------------------------------------------------------------------
# PaginatedCollection
# ---------------------------------------------------------------------------


class TestPaginatedCollection:
    def test_mobile_shape(self) -> None:
        payload = {
            "count": 2,
            "total": 12,
            "page": 1,
            "totalPages": 2,
            "hasMore": True,
            "data": [{"id": 1}, {"id": 2}],
        }
        page = PaginatedCollection.from_payload(payload, page=1, limit=10)

        assert page.total == 12
        assert page.has_more
        assert page.meta == {}

    def test_admin_shape(self) -> None:
        payload = {
            "categories": [{"_id": "c1"}],
            "pagination": {"page": 3, "limit": 5, "total": 11, "pages": 3},
        }
        page = PaginatedCollection.from_payload(
            payload, page=3, limit=5, items_key="categories"
        )

        assert page.data == [{"_id": "c1"}]
        assert (page.page, page.limit, page.total) == (3, 5, 11)
        assert not page.has_more

    def test_has_more_derived_not_trusted(self) -> None:
        payload = {"data": [1, 2], "total": 2, "page": 1, "hasMore": True}
        assert not PaginatedCollection.from_payload(payload, page=1, limit=10).has_more

    def test_missing_total_is_estimated(self) -> None:
        page = PaginatedCollection.from_payload({"data": [1, 2, 3]}, page=2, limit=10)
        assert page.total == 13
        assert not page.has_more

    def test_boolean_total_is_ignored(self) -> None:
        page = PaginatedCollection.from_payload({"data": [1, 2], "total": True}, page=1, limit=10)
        assert page.total == 2
        assert not page.has_more

    def test_data_truncated_to_limit(self) -> None:
        page = PaginatedCollection.from_payload(
            {"data": list(range(15)), "total": 15}, page=1, limit=10
        )
        assert len(page.data) == 10

    def test_extra_keys_kept_in_meta(self) -> None:
        payload = {"data": [], "total": 0, "unreadCount": 4}
        page = PaginatedCollection.from_payload(payload, page=1, limit=10)
        assert page.meta == {"unreadCount": 4}

    @pytest.mark.parametrize("payload", [None, [], "x", {"data": "nope"}, {"items": []}])
    def test_bad_shapes_raise(self, payload: Any) -> None:
        with pytest.raises(ResponseShapeError):
            PaginatedCollection.from_payload(payload, page=1, limit=10)


# ---------------------------------------------------------------------------
# Profiles and request bodies
# ---------------------------------------------------------------------------


class TestProfiles:
    def test_partner_profile_from_camel_case(self) -> None:
        profile = PartnerProfile.model_validate(
            {
                "id": "p1",
                "phone": "9876543210",
                "isOnline": True,
                "isVerified": True,
                "vehicle": {"type": "bike", "number": "KA01"},
                "stats": {"totalDeliveries": 12, "rating": 4.8},
                "newServerField": "kept",
            }
        )

        assert profile.is_online
        assert not profile.kyc_pending
        assert profile.vehicle.number == "KA01"
        assert profile.stats.total_deliveries == 12
        assert profile.model_dump(by_alias=True)["newServerField"] == "kept"

    def test_admin_profile_uses_mongo_id(self) -> None:
        profile = AdminProfile.model_validate({"_id": "a1", "email": "admin@bhaojan.com"})
        assert profile.id == "a1"


class TestRequestBodies:
    def test_partial_update_omits_unset_fields(self) -> None:
        assert PartnerProfileUpdate(name="Ravi").to_body() == {"name": "Ravi"}

    def test_withdrawal_amount_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            WithdrawalRequest(amount=0)

    def test_category_input_is_camel_case(self) -> None:
        body = CategoryInput(name="Fashion", is_active=True, order=2).to_body()
        assert body == {"name": "Fashion", "isActive": True, "order": 2}

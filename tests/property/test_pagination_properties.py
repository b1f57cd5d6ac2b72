"""Property tests for pagination.

For a collection of N items fetched L at a time, the page ceil(N/L) is the
last one: it reports has_more False, every earlier page reports True, and
walking the pages yields every item exactly once.
"""

from __future__ import annotations

import math

import httpx
import pytest
from hypothesis import given, settings, strategies as st

from bhaojan_client.api import PartnerOrdersApi
from bhaojan_client.models.envelope import PaginatedCollection
from bhaojan_client.storage import CredentialStore, MemoryBackend
from bhaojan_client.transport.client import ApiClient
from tests.fake_server import paginate
from tests.strategies import TEST_BASE_URL

totals = st.integers(min_value=1, max_value=120)
limits = st.integers(min_value=1, max_value=25)


def _admin_shape(items: list[int], page: int, limit: int) -> dict:
    start = (page - 1) * limit
    return {
        "users": items[start:start + limit],
        "pagination": {
            "page": page,
            "limit": limit,
            "total": len(items),
            "pages": math.ceil(len(items) / limit),
        },
    }


@settings(max_examples=200)
@given(total=totals, limit=limits)
def test_last_page_has_no_more(total: int, limit: int) -> None:
    items = list(range(total))
    last = math.ceil(total / limit)

    for page in range(1, last + 1):
        mobile = PaginatedCollection.from_payload(paginate(items, page, limit), page=page, limit=limit)
        admin = PaginatedCollection.from_payload(
            _admin_shape(items, page, limit), page=page, limit=limit, items_key="users"
        )
        assert mobile.has_more is (page < last)
        assert admin.has_more is (page < last)
        assert mobile.data == admin.data


@settings(max_examples=50)
@given(total=totals, limit=limits)
@pytest.mark.asyncio
async def test_walking_pages_yields_each_item_once(total: int, limit: int) -> None:
    items = [{"id": f"order-{n}"} for n in range(total)]

    def handler(request: httpx.Request) -> httpx.Response:
        page = int(request.url.params["page"])
        size = int(request.url.params["limit"])
        return httpx.Response(200, json={"success": True, "response": paginate(items, page, size)})

    store = CredentialStore(MemoryBackend(), token_key="partnerToken", profile_key="partnerData")
    seen: list[dict] = []
    async with ApiClient(TEST_BASE_URL, store, transport=httpx.MockTransport(handler)) as client:
        orders = PartnerOrdersApi(client)
        page = 1
        while True:
            result = await orders.history(page=page, limit=limit)
            assert result.success
            seen.extend(result.response.data)
            if not result.response.has_more:
                break
            page += 1

    assert page == math.ceil(total / limit)
    assert seen == items

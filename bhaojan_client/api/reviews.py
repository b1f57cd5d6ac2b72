"""Product reviews."""

from __future__ import annotations

from typing import Any, Mapping

from bhaojan_client.api.base import DEFAULT_PAGE_SIZE, ApiModule, body
from bhaojan_client.models.envelope import ApiEnvelope, PaginatedCollection
from bhaojan_client.models.requests import ReviewCreate


class ReviewsApi(ApiModule):
    async def for_product(
        self, product_id: str, page: int = 1, limit: int = DEFAULT_PAGE_SIZE
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        """Public. The rating distribution is kept in the page's ``meta``."""
        return await self._paginated(
            f"/reviews/product/{product_id}", page, limit, items_key="reviews"
        )

    async def create(self, review: ReviewCreate | Mapping[str, Any]) -> ApiEnvelope[Any]:
        return await self._client.post("/reviews", json=body(review))

    async def mine(self) -> ApiEnvelope[Any]:
        return await self._client.get("/reviews/my-reviews")

    async def can_review_order(self, order_id: str) -> ApiEnvelope[Any]:
        return await self._client.get(f"/reviews/can-review/{order_id}")

    async def delete(self, review_id: str) -> ApiEnvelope[Any]:
        return await self._client.delete(f"/reviews/{review_id}")

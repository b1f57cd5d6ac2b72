"""Public catalogue endpoints: products, categories, banners.

Reads are public; create/update/delete require an authenticated session.
"""

from __future__ import annotations

from typing import Any, Mapping

from bhaojan_client.api.base import DEFAULT_PAGE_SIZE, ApiModule, body
from bhaojan_client.models.envelope import ApiEnvelope, PaginatedCollection
from bhaojan_client.models.requests import BannerInput, CategoryInput, ProductInput


class ProductsApi(ApiModule):
    async def list(
        self,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        *,
        category: str | None = None,
        search: str | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
        min_rating: float | None = None,
        sort: str | None = None,
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        """Sort is one of price_low_to_high, price_high_to_low, rating."""
        params = {
            "category": category,
            "search": search,
            "minPrice": min_price,
            "maxPrice": max_price,
            "minRating": min_rating,
            "sort": sort,
        }
        return await self._paginated("/products", page, limit, params=params)

    async def by_category(
        self, category_id: str, page: int = 1, limit: int = DEFAULT_PAGE_SIZE
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        return await self._paginated(f"/products/category/{category_id}", page, limit)

    async def trending(self) -> ApiEnvelope[Any]:
        return await self._client.get("/products/home/trending")

    async def fashion_picks(self) -> ApiEnvelope[Any]:
        return await self._client.get("/products/home/fashion-picks")

    async def get(self, product_id: str) -> ApiEnvelope[Any]:
        return await self._client.get(f"/products/{product_id}")

    async def create(self, product: ProductInput | Mapping[str, Any]) -> ApiEnvelope[Any]:
        return await self._client.post("/products", json=body(product))

    async def update(
        self, product_id: str, product: ProductInput | Mapping[str, Any]
    ) -> ApiEnvelope[Any]:
        return await self._client.put(f"/products/{product_id}", json=body(product))

    async def delete(self, product_id: str) -> ApiEnvelope[Any]:
        return await self._client.delete(f"/products/{product_id}")


class CategoriesApi(ApiModule):
    async def list(self) -> ApiEnvelope[Any]:
        """All active categories; the server does not paginate this list."""
        return await self._client.get("/categories")

    async def get(self, category_id: str) -> ApiEnvelope[Any]:
        return await self._client.get(f"/categories/{category_id}")

    async def create(self, category: CategoryInput | Mapping[str, Any]) -> ApiEnvelope[Any]:
        return await self._client.post("/categories", json=body(category))

    async def update(
        self, category_id: str, category: CategoryInput | Mapping[str, Any]
    ) -> ApiEnvelope[Any]:
        return await self._client.put(f"/categories/{category_id}", json=body(category))

    async def delete(self, category_id: str) -> ApiEnvelope[Any]:
        return await self._client.delete(f"/categories/{category_id}")


class BannersApi(ApiModule):
    async def list(self) -> ApiEnvelope[Any]:
        return await self._client.get("/banners")

    async def get(self, banner_id: str) -> ApiEnvelope[Any]:
        return await self._client.get(f"/banners/{banner_id}")

    async def create(self, banner: BannerInput | Mapping[str, Any]) -> ApiEnvelope[Any]:
        return await self._client.post("/banners", json=body(banner))

    async def update(
        self, banner_id: str, banner: BannerInput | Mapping[str, Any]
    ) -> ApiEnvelope[Any]:
        return await self._client.put(f"/banners/{banner_id}", json=body(banner))

    async def delete(self, banner_id: str) -> ApiEnvelope[Any]:
        return await self._client.delete(f"/banners/{banner_id}")

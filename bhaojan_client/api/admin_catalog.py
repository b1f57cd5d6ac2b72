"""Admin CRUD for categories, home banners and events."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from bhaojan_client.api.base import DEFAULT_PAGE_SIZE, ApiModule, body
from bhaojan_client.models.envelope import ApiEnvelope, PaginatedCollection
from bhaojan_client.models.requests import BannerInput, BannerOrder, CategoryInput, EventUpdate


class AdminCategoriesApi(ApiModule):
    async def list(
        self,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        *,
        search: str | None = None,
        status: str | None = None,
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        return await self._paginated(
            "/admin/categories",
            page,
            limit,
            items_key="categories",
            params={"search": search, "status": status},
        )

    async def get(self, category_id: str) -> ApiEnvelope[Any]:
        return await self._client.get(f"/admin/categories/{category_id}")

    async def create(self, category: CategoryInput | Mapping[str, Any]) -> ApiEnvelope[Any]:
        return await self._client.post("/admin/categories", json=body(category))

    async def update(
        self, category_id: str, category: CategoryInput | Mapping[str, Any]
    ) -> ApiEnvelope[Any]:
        return await self._client.put(f"/admin/categories/{category_id}", json=body(category))

    async def delete(self, category_id: str) -> ApiEnvelope[Any]:
        return await self._client.delete(f"/admin/categories/{category_id}")

    async def toggle(self, category_id: str) -> ApiEnvelope[Any]:
        return await self._client.put(f"/admin/categories/{category_id}/toggle")


class AdminBannersApi(ApiModule):
    async def list(
        self,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        *,
        search: str | None = None,
        status: str | None = None,
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        return await self._paginated(
            "/admin/banners",
            page,
            limit,
            items_key="banners",
            params={"search": search, "status": status},
        )

    async def get(self, banner_id: str) -> ApiEnvelope[Any]:
        return await self._client.get(f"/admin/banners/{banner_id}")

    async def create(self, banner: BannerInput | Mapping[str, Any]) -> ApiEnvelope[Any]:
        return await self._client.post("/admin/banners", json=body(banner))

    async def update(
        self, banner_id: str, banner: BannerInput | Mapping[str, Any]
    ) -> ApiEnvelope[Any]:
        return await self._client.put(f"/admin/banners/{banner_id}", json=body(banner))

    async def delete(self, banner_id: str) -> ApiEnvelope[Any]:
        return await self._client.delete(f"/admin/banners/{banner_id}")

    async def toggle(self, banner_id: str) -> ApiEnvelope[Any]:
        return await self._client.put(f"/admin/banners/{banner_id}/toggle")

    async def reorder(
        self, orders: Iterable[BannerOrder | Mapping[str, Any]]
    ) -> ApiEnvelope[Any]:
        """Set display order for several banners in one call."""
        payload = {"bannerOrders": [body(entry) for entry in orders]}
        return await self._client.put("/admin/banners/reorder", json=payload)


class AdminEventsApi(ApiModule):
    async def list(
        self,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        *,
        search: str | None = None,
        status: str | None = None,
        category: str | None = None,
        featured: bool | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> ApiEnvelope[PaginatedCollection[Any]]:
        params = {
            "search": search,
            "status": status,
            "category": category,
            "featured": None if featured is None else str(featured).lower(),
            "sortBy": sort_by,
            "sortOrder": sort_order,
        }
        return await self._paginated(
            "/admin/events", page, limit, items_key="events", params=params
        )

    async def get(self, event_id: str) -> ApiEnvelope[Any]:
        return await self._client.get(f"/admin/events/{event_id}")

    async def update(
        self, event_id: str, update: EventUpdate | Mapping[str, Any]
    ) -> ApiEnvelope[Any]:
        return await self._client.put(f"/admin/events/{event_id}", json=body(update))

    async def toggle_status(self, event_id: str) -> ApiEnvelope[Any]:
        return await self._client.patch(f"/admin/events/{event_id}/toggle-status")

    async def toggle_featured(self, event_id: str) -> ApiEnvelope[Any]:
        return await self._client.patch(f"/admin/events/{event_id}/toggle-featured")

    async def delete(self, event_id: str) -> ApiEnvelope[Any]:
        return await self._client.delete(f"/admin/events/{event_id}")

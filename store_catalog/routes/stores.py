"""Store catalog endpoints.

GET    /v1/stores                 - list every store
POST   /v1/stores                 - create a store
GET    /v1/stores/search          - search by name (paged, advisory when empty)
GET    /v1/stores/{storeId}       - store detail with all reviews
PUT    /v1/stores/{storeId}       - update fields and replace categories
DELETE /v1/stores/{storeId}       - delete a store

Routers are thin: one service call per request, inside one session.
NotFoundError is mapped to 404 by the app-level handler.
"""

from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from store_catalog.schemas import (
    ErrorResponse,
    PageRequest,
    SearchResponse,
    StoreDetail,
    StoreRequest,
    StoreSummary,
)
from store_catalog.schemas.common import SORT_PATTERN
from store_catalog.services.store_catalog import open_catalog_service
from store_catalog.settings import get_settings

router = APIRouter()

NOT_FOUND_RESPONSES = {404: {"model": ErrorResponse, "description": "Unknown store or category id"}}


@router.get("", response_model=list[StoreSummary])
async def list_stores() -> list[StoreSummary]:
    """List every store with its category names."""
    async with open_catalog_service() as service:
        return await service.list_all_stores()


@router.post(
    "",
    response_model=StoreSummary,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND_RESPONSES,
)
async def create_store(request: StoreRequest) -> StoreSummary:
    """Create a store. Unknown category ids -> 404, nothing saved."""
    async with open_catalog_service() as service:
        return await service.create_store(request)


@router.get("/search", response_model=SearchResponse)
async def search_stores(
    keyword: str | None = Query(
        default=None,
        description="Substring of the store name",
        max_length=200,
    ),
    page: int = Query(default=0, ge=0, description="0-based page number"),
    size: int | None = Query(default=None, ge=1, description="Page size"),
    sort: str | None = Query(
        default=None,
        pattern=SORT_PATTERN,
        description="Sort field with optional direction",
        examples=["storeName", "createdAt,desc"],
    ),
) -> SearchResponse:
    """Search stores by name.

    Returns either {"kind": "results", "page": ...} or an advisory
    {"kind": "advisory", "code": ..., "message": ...} when no keyword was
    given or nothing matched.
    """
    settings = get_settings()
    page_request = PageRequest(
        page=page,
        size=min(size or settings.default_page_size, settings.max_page_size),
        sort=sort,
    )
    async with open_catalog_service() as service:
        return await service.search_stores(keyword, page_request)


@router.get("/{store_id}", response_model=StoreDetail, responses=NOT_FOUND_RESPONSES)
async def get_store_detail(store_id: UUID) -> StoreDetail:
    """Store record plus every review of the store."""
    async with open_catalog_service() as service:
        return await service.get_store_detail(store_id)


@router.put("/{store_id}", response_model=StoreSummary, responses=NOT_FOUND_RESPONSES)
async def update_store(store_id: UUID, request: StoreRequest) -> StoreSummary:
    """Overwrite store fields and replace its categories."""
    async with open_catalog_service() as service:
        return await service.update_store(store_id, request)


@router.delete(
    "/{store_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND_RESPONSES,
)
async def delete_store(store_id: UUID) -> Response:
    """Delete a store and its category associations."""
    async with open_catalog_service() as service:
        await service.delete_store(store_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Store catalog service.

CRUD, search and detail views for stores and their category associations,
plus read-only aggregation of review ratings.

Transactions:
- The caller opens one session per request and builds the repositories on it
- The service never commits; the session scope commits on success and rolls
  back on any exception (NotFoundError included)

Category replacement is validate-then-swap: every requested category id is
resolved before the store is touched, so a failed lookup never leaves a
half-rebuilt association list behind.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
import logging
from typing import Protocol
from uuid import UUID

from store_catalog.models import Address, Category, Review, Store, StoreCategory
from store_catalog.models.store import generate_store_id
from store_catalog.schemas import (
    AddressOut,
    Page,
    PageRequest,
    ReviewItem,
    SearchAdvisory,
    SearchResults,
    StoreDetail,
    StoreRequest,
    StoreSearchResult,
    StoreSummary,
)
from store_catalog.stores.postgres import get_session
from store_catalog.stores.repositories import CategoryRepository, ReviewRepository, StoreRepository

logger = logging.getLogger("uvicorn.error")

MSG_EMPTY_KEYWORD = "Please enter a search term"
MSG_NO_RESULTS = "No stores match the search term"


class CatalogError(RuntimeError):
    pass


class NotFoundError(CatalogError):
    """A store or category id did not resolve to an existing record."""

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity.capitalize()} not found: {identifier}")


class StoreRepo(Protocol):
    async def find_all(self) -> list[Store]: ...

    async def find_by_id(self, store_id: UUID) -> Store | None: ...

    async def search_by_name(self, keyword: str, page_request: PageRequest) -> Page[Store]: ...

    async def save(self, store: Store) -> Store: ...

    async def delete(self, store: Store) -> None: ...


class CategoryRepo(Protocol):
    async def find_by_id(self, category_id: int) -> Category | None: ...


class ReviewRepo(Protocol):
    async def find_by_store_id(self, store_id: UUID) -> list[Review]: ...

    async def average_rating_by_store_id(self, store_id: UUID) -> float | None: ...


def to_summary(store: Store) -> StoreSummary:
    """Map a Store entity to its summary shape."""
    address = store.address
    return StoreSummary(
        store_id=store.id,
        store_name=store.name,
        phone_number=store.phone_number,
        address=AddressOut(
            address=address.address,
            detail_address=address.detail_address,
            postcode=address.postcode,
        ),
        category_names=store.category_names,
    )


def _address_from(request: StoreRequest) -> Address:
    return Address(request.address, request.detail_address, request.postcode)


class StoreCatalogService:
    """All read/write operations on stores.

    Args:
        stores: Store persistence (find/search/save/delete).
        categories: Category lookup by id.
        reviews: Review listing and average rating.
    """

    def __init__(self, stores: StoreRepo, categories: CategoryRepo, reviews: ReviewRepo) -> None:
        self.stores = stores
        self.categories = categories
        self.reviews = reviews

    async def list_all_stores(self) -> list[StoreSummary]:
        stores = await self.stores.find_all()
        return [to_summary(store) for store in stores]

    async def create_store(self, request: StoreRequest) -> StoreSummary:
        """Create a store with the requested categories.

        Raises:
            NotFoundError: If any category id is unknown (nothing is saved).
        """
        store_categories = await self._build_store_categories(request.category_ids)

        store = Store(
            id=generate_store_id(),
            name=request.store_name,
            phone_number=request.phone_number,
            address=_address_from(request),
            store_categories=store_categories,
        )
        await self.stores.save(store)

        logger.info(f"[catalog] created store id={store.id} categories={len(store_categories)}")
        return to_summary(store)

    async def update_store(self, store_id: UUID, request: StoreRequest) -> StoreSummary:
        """Overwrite a store's fields and replace its whole category set.

        Raises:
            NotFoundError: If the store or any category id is unknown.
        """
        store = await self._get_store(store_id)

        # Resolve before mutating: a failed lookup leaves the entity untouched
        store_categories = await self._build_store_categories(request.category_ids)

        store.name = request.store_name
        store.phone_number = request.phone_number
        store.address = _address_from(request)
        store.store_categories = store_categories
        await self.stores.save(store)

        logger.info(f"[catalog] updated store id={store.id} categories={len(store_categories)}")
        return to_summary(store)

    async def delete_store(self, store_id: UUID) -> None:
        """Delete a store and, by cascade, its category associations.

        Raises:
            NotFoundError: If the store does not exist.
        """
        store = await self._get_store(store_id)
        await self.stores.delete(store)
        logger.info(f"[catalog] deleted store id={store_id}")

    async def search_stores(
        self,
        keyword: str | None,
        page_request: PageRequest,
    ) -> SearchAdvisory | SearchResults:
        """Search stores by name.

        Blank keywords and empty result pages are normal outcomes reported
        as SearchAdvisory, not errors.
        """
        if keyword is None or not keyword.strip():
            return SearchAdvisory(code="EMPTY_KEYWORD", message=MSG_EMPTY_KEYWORD)

        stores_page = await self.stores.search_by_name(keyword, page_request)
        if stores_page.is_empty:
            logger.info(f"[catalog] search keyword={keyword!r} page={page_request.page}: no results")
            return SearchAdvisory(code="NO_RESULTS", message=MSG_NO_RESULTS)

        results = [
            StoreSearchResult(
                store_name=store.name,
                average_rating=await self.get_average_rating(store.id),
            )
            for store in stores_page.content
        ]
        return SearchResults(
            page=Page[StoreSearchResult](
                content=results,
                page=stores_page.page,
                size=stores_page.size,
                total_elements=stores_page.total_elements,
            )
        )

    async def get_average_rating(self, store_id: UUID) -> float:
        """Mean review rating; 0.0 when the store has no reviews."""
        avg = await self.reviews.average_rating_by_store_id(store_id)
        return avg if avg is not None else 0.0

    async def get_store_detail(self, store_id: UUID) -> StoreDetail:
        """Store record plus its complete review list.

        Raises:
            NotFoundError: If the store does not exist.
        """
        store = await self._get_store(store_id)
        reviews = await self.reviews.find_by_store_id(store.id)
        return StoreDetail(
            store=to_summary(store),
            reviews=[
                ReviewItem(
                    review_id=review.id,
                    rating=review.rating,
                    comment=review.comment,
                    created_at=review.created_at,
                )
                for review in reviews
            ],
        )

    async def _get_store(self, store_id: UUID) -> Store:
        store = await self.stores.find_by_id(store_id)
        if store is None:
            raise NotFoundError("store", store_id)
        return store

    async def _build_store_categories(self, category_ids: list[int]) -> list[StoreCategory]:
        """Resolve ids (first occurrence wins) into fresh, unattached join rows.

        Raises:
            NotFoundError: On the first id that does not resolve.
        """
        store_categories: list[StoreCategory] = []
        for category_id in dict.fromkeys(category_ids):
            category = await self.categories.find_by_id(category_id)
            if category is None:
                raise NotFoundError("category", category_id)
            store_categories.append(StoreCategory(category=category))
        return store_categories


@asynccontextmanager
async def open_catalog_service() -> AsyncGenerator[StoreCatalogService, None]:
    """Service bound to a fresh session; one block = one transaction.

    Usage:
        async with open_catalog_service() as service:
            summary = await service.create_store(request)
    """
    async with get_session() as session:
        yield StoreCatalogService(
            stores=StoreRepository(session),
            categories=CategoryRepository(session),
            reviews=ReviewRepository(session),
        )

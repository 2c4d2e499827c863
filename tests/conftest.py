"""Shared fixtures: in-memory repositories for StoreCatalogService.

The fake "database" keeps detached copies of saved stores, so an entity
mutated in memory but never saved does not change what later reads see
(the same guarantee a rolled-back session gives).
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from uuid import UUID

import pytest

from store_catalog.models import Address, Category, Review, Store, StoreCategory
from store_catalog.schemas import Page, PageRequest
from store_catalog.services.store_catalog import StoreCatalogService


def clone_store(store: Store) -> Store:
    """Detached copy of a store and its associations."""
    address = store.address
    return Store(
        id=store.id,
        name=store.name,
        phone_number=store.phone_number,
        address=Address(address.address, address.detail_address, address.postcode),
        store_categories=[StoreCategory(category=sc.category) for sc in store.store_categories],
    )


@dataclass
class FakeDatabase:
    stores: dict[UUID, Store] = field(default_factory=dict)
    categories: dict[int, Category] = field(default_factory=dict)
    reviews: list[Review] = field(default_factory=list)
    save_calls: int = 0
    delete_calls: int = 0

    def add_category(self, category_id: int, name: str) -> Category:
        category = Category(id=category_id, name=name)
        self.categories[category_id] = category
        return category

    def add_review(self, store_id: UUID, rating: int, comment: str | None = None) -> Review:
        review_id = len(self.reviews) + 1
        review = Review(
            id=review_id,
            store_id=store_id,
            rating=rating,
            comment=comment,
            created_at=datetime(2026, 1, 1, tzinfo=timezone.utc) + timedelta(minutes=review_id),
        )
        self.reviews.append(review)
        return review


class FakeStoreRepository:
    def __init__(self, db: FakeDatabase) -> None:
        self.db = db

    async def find_all(self) -> list[Store]:
        return [clone_store(s) for s in self.db.stores.values()]

    async def find_by_id(self, store_id: UUID) -> Store | None:
        store = self.db.stores.get(store_id)
        return clone_store(store) if store is not None else None

    async def search_by_name(self, keyword: str, page_request: PageRequest) -> Page[Store]:
        matches = sorted(
            (s for s in self.db.stores.values() if keyword in s.name),
            key=lambda s: s.name,
        )
        order = page_request.order()
        if order is not None and order[1]:
            matches.reverse()
        window = matches[page_request.offset : page_request.offset + page_request.size]
        return Page[Store](
            content=[clone_store(s) for s in window],
            page=page_request.page,
            size=page_request.size,
            total_elements=len(matches),
        )

    async def save(self, store: Store) -> Store:
        self.db.save_calls += 1
        self.db.stores[store.id] = clone_store(store)
        return store

    async def delete(self, store: Store) -> None:
        self.db.delete_calls += 1
        del self.db.stores[store.id]


class FakeCategoryRepository:
    def __init__(self, db: FakeDatabase) -> None:
        self.db = db

    async def find_by_id(self, category_id: int) -> Category | None:
        return self.db.categories.get(category_id)


class FakeReviewRepository:
    def __init__(self, db: FakeDatabase) -> None:
        self.db = db

    async def find_by_store_id(self, store_id: UUID) -> list[Review]:
        return [r for r in self.db.reviews if r.store_id == store_id]

    async def average_rating_by_store_id(self, store_id: UUID) -> float | None:
        ratings = [r.rating for r in self.db.reviews if r.store_id == store_id]
        if not ratings:
            return None
        return sum(ratings) / len(ratings)


@pytest.fixture
def db() -> FakeDatabase:
    """Fake database preloaded with four categories."""
    fake = FakeDatabase()
    fake.add_category(1, "Korean")
    fake.add_category(2, "Chinese")
    fake.add_category(3, "Chicken")
    fake.add_category(4, "Pizza")
    return fake


@pytest.fixture
def service(db: FakeDatabase) -> StoreCatalogService:
    return StoreCatalogService(
        stores=FakeStoreRepository(db),
        categories=FakeCategoryRepository(db),
        reviews=FakeReviewRepository(db),
    )

"""Repositories for the store catalog.

Each repository wraps the request's AsyncSession; the caller owns the
transaction (see `get_session`). Writes only flush, never commit.

Relationships are eager-loaded with selectinload because async sessions
cannot lazy load.
"""

from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from store_catalog.models import Category, Review, Store, StoreCategory
from store_catalog.schemas.common import Page, PageRequest

# PageRequest sort field -> column
SORT_COLUMNS = {
    "storeName": Store.name,
    "createdAt": Store.created_at,
}


def _with_categories(query: Select) -> Select:
    return query.options(
        selectinload(Store.store_categories).joinedload(StoreCategory.category)
    )


class StoreRepository:
    """Store aggregate persistence (store row + owned category associations)."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_all(self) -> list[Store]:
        result = await self.session.execute(
            _with_categories(select(Store)).order_by(Store.created_at, Store.id)
        )
        return list(result.scalars().all())

    async def find_by_id(self, store_id: UUID) -> Store | None:
        result = await self.session.execute(
            _with_categories(select(Store)).where(Store.id == store_id)
        )
        return result.scalar_one_or_none()

    async def search_by_name(self, keyword: str, page_request: PageRequest) -> Page[Store]:
        """Stores whose name contains `keyword` (literal substring, SQL LIKE).

        Args:
            keyword: Substring to look for. `%` and `_` are matched literally.
            page_request: Page number/size and optional sort.

        Returns:
            Page of stores plus total match count.
        """
        condition = Store.name.contains(keyword, autoescape=True)

        count_result = await self.session.execute(
            select(func.count(Store.id)).where(condition)
        )
        total = count_result.scalar() or 0

        query = _with_categories(select(Store)).where(condition)
        order = page_request.order()
        if order is None:
            query = query.order_by(Store.name.asc(), Store.id.asc())
        else:
            field, descending = order
            column = SORT_COLUMNS[field]
            query = query.order_by(column.desc() if descending else column.asc(), Store.id.asc())
        query = query.offset(page_request.offset).limit(page_request.size)

        result = await self.session.execute(query)
        return Page[Store](
            content=list(result.scalars().all()),
            page=page_request.page,
            size=page_request.size,
            total_elements=total,
        )

    async def save(self, store: Store) -> Store:
        self.session.add(store)
        await self.session.flush()
        return store

    async def delete(self, store: Store) -> None:
        await self.session.delete(store)
        await self.session.flush()


class CategoryRepository:
    """Read-only category lookup."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, category_id: int) -> Category | None:
        return await self.session.get(Category, category_id)


class ReviewRepository:
    """Read-only review queries."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_store_id(self, store_id: UUID) -> list[Review]:
        result = await self.session.execute(
            select(Review)
            .where(Review.store_id == store_id)
            .order_by(Review.created_at, Review.id)
        )
        return list(result.scalars().all())

    async def average_rating_by_store_id(self, store_id: UUID) -> float | None:
        """Mean rating, or None when the store has no reviews."""
        result = await self.session.execute(
            select(func.avg(Review.rating)).where(Review.store_id == store_id)
        )
        avg = result.scalar()
        return float(avg) if avg is not None else None

"""Category and StoreCategory models.

Categories are reference data (seeded, never edited by the catalog).
StoreCategory pairs one store with one category; rows are rebuilt
whenever a store's category set is replaced.
"""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from store_catalog.models.store import Store
from store_catalog.stores.postgres import Base


class Category(Base):
    """Store category (e.g. "Korean", "Chinese", "Chicken")."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), unique=True)

    def __repr__(self) -> str:
        return f"<Category {self.id} {self.name}>"


class StoreCategory(Base):
    """Join row between a store and a category."""

    __tablename__ = "store_categories"

    # Surrogate key, also defines association order
    id: Mapped[int] = mapped_column(primary_key=True)

    store_id: Mapped[UUID] = mapped_column(ForeignKey("stores.id", ondelete="CASCADE"), index=True)
    category_id: Mapped[int] = mapped_column(ForeignKey("categories.id"), index=True)

    store: Mapped[Store] = relationship(back_populates="store_categories")
    category: Mapped[Category] = relationship(lazy="joined")

    def __repr__(self) -> str:
        return f"<StoreCategory store={self.store_id} category={self.category_id}>"

"""Store model.

A Store is a restaurant/business record owned by the catalog.
Its postal address is an embedded value (three columns on `stores`),
and its category memberships are owned join rows (StoreCategory).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import DateTime, String, Uuid, func
from sqlalchemy.orm import Mapped, composite, mapped_column, relationship

from store_catalog.stores.postgres import Base

if TYPE_CHECKING:
    from store_catalog.models.category import StoreCategory


def generate_store_id() -> UUID:
    """Generate unique store ID."""
    return uuid4()


@dataclass
class Address:
    """Postal address embedded in a store row."""

    address: str
    detail_address: str | None
    postcode: str


class Store(Base):
    """Restaurant/store record."""

    __tablename__ = "stores"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=generate_store_id)

    name: Mapped[str] = mapped_column(String(200), index=True)
    phone_number: Mapped[str] = mapped_column(String(30))

    # Embedded address columns; the street line keeps the "address" column name
    street: Mapped[str] = mapped_column("address", String(255))
    detail_address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    postcode: Mapped[str] = mapped_column(String(10))

    address: Mapped[Address] = composite(Address, "street", "detail_address", "postcode")

    # Owned associations; replacing the list deletes the orphaned rows
    store_categories: Mapped[list[StoreCategory]] = relationship(
        back_populates="store",
        cascade="all, delete-orphan",
        order_by="StoreCategory.id",
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    @property
    def category_names(self) -> list[str]:
        """Category display names in association order."""
        return [sc.category.name for sc in self.store_categories]

    def __repr__(self) -> str:
        return f"<Store {self.id} {self.name}>"

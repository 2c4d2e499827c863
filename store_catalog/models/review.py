"""Review model.

Customer rating/comment for a store. Read-only from the catalog's side:
it only lists reviews and averages their ratings.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, SmallInteger, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from store_catalog.stores.postgres import Base


class Review(Base):
    """Customer review of a store."""

    __tablename__ = "reviews"

    id: Mapped[int] = mapped_column(primary_key=True)

    store_id: Mapped[UUID] = mapped_column(ForeignKey("stores.id", ondelete="CASCADE"), index=True)

    rating: Mapped[int] = mapped_column(SmallInteger)  # 1-5
    comment: Mapped[str | None] = mapped_column(Text)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Review {self.id} store={self.store_id} rating={self.rating}>"

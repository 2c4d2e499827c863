"""Schemas for the store catalog endpoints (/v1/stores)."""

from datetime import datetime
from typing import Annotated, Literal
from uuid import UUID

from pydantic import BaseModel, Field

from store_catalog.schemas.common import Page


class StoreRequest(BaseModel):
    """Create/update payload. `category_ids` fully replaces the store's categories."""

    store_name: str = Field(alias="storeName", min_length=1, max_length=200)
    phone_number: str = Field(alias="phoneNumber", min_length=1, max_length=30)
    address: str = Field(min_length=1, max_length=255)
    detail_address: str | None = Field(alias="detailAddress", default=None, max_length=255)
    postcode: str = Field(min_length=1, max_length=10)
    category_ids: list[int] = Field(alias="categoryIds", default_factory=list)

    model_config = {"populate_by_name": True}


class AddressOut(BaseModel):
    """Embedded postal address."""

    address: str
    detail_address: str | None = Field(alias="detailAddress", default=None)
    postcode: str

    model_config = {"populate_by_name": True}


class StoreSummary(BaseModel):
    """Store as returned by list/create/update."""

    store_id: UUID = Field(alias="storeId")
    store_name: str = Field(alias="storeName")
    phone_number: str = Field(alias="phoneNumber")
    address: AddressOut
    category_names: list[str] = Field(alias="categoryNames", default_factory=list)

    model_config = {"populate_by_name": True}


class ReviewItem(BaseModel):
    """A single review in the store detail view."""

    review_id: int = Field(alias="reviewId")
    rating: int
    comment: str | None = None
    created_at: datetime | None = Field(alias="createdAt", default=None)

    model_config = {"populate_by_name": True}


class StoreDetail(BaseModel):
    """Full store record plus every review of the store."""

    store: StoreSummary
    reviews: list[ReviewItem] = Field(default_factory=list)


class StoreSearchResult(BaseModel):
    """Search hit: store name and its mean review rating."""

    store_name: str = Field(alias="storeName")
    average_rating: float = Field(alias="averageRating", default=0.0, ge=0)

    model_config = {"populate_by_name": True}


class SearchAdvisory(BaseModel):
    """Informational search outcome (no keyword, no match). Not an error."""

    kind: Literal["advisory"] = "advisory"
    code: Literal["EMPTY_KEYWORD", "NO_RESULTS"]
    message: str


class SearchResults(BaseModel):
    """Successful search outcome: a page of results."""

    kind: Literal["results"] = "results"
    page: Page[StoreSearchResult]


SearchResponse = Annotated[SearchAdvisory | SearchResults, Field(discriminator="kind")]

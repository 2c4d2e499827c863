"""Pydantic schemas for API request/response validation."""

from store_catalog.schemas.common import ErrorDetail, ErrorResponse, Page, PageRequest
from store_catalog.schemas.store import (
    AddressOut,
    ReviewItem,
    SearchAdvisory,
    SearchResponse,
    SearchResults,
    StoreDetail,
    StoreRequest,
    StoreSearchResult,
    StoreSummary,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "Page",
    "PageRequest",
    "AddressOut",
    "ReviewItem",
    "SearchAdvisory",
    "SearchResponse",
    "SearchResults",
    "StoreDetail",
    "StoreRequest",
    "StoreSearchResult",
    "StoreSummary",
]

"""Common schemas used across the API."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, computed_field

T = TypeVar("T")

# "field" or "field,asc|desc"
SORT_PATTERN = r"^(storeName|createdAt)(,(asc|desc))?$"


class ErrorDetail(BaseModel):
    """Structured error detail."""

    code: str
    message: str
    detail: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Standard error response format.

    Format: { "error": { "code": str, "message": str, "detail": object } }
    """

    error: ErrorDetail


class PageRequest(BaseModel):
    """Requested page: 0-based page number, page size and optional sort."""

    page: int = Field(default=0, ge=0)
    size: int = Field(default=10, ge=1)
    sort: str | None = Field(default=None, pattern=SORT_PATTERN)

    @property
    def offset(self) -> int:
        return self.page * self.size

    def order(self) -> tuple[str, bool] | None:
        """Parse `sort` into (field, descending), or None when unsorted."""
        if not self.sort:
            return None
        field, _, direction = self.sort.partition(",")
        return field, direction == "desc"


class Page(BaseModel, Generic[T]):
    """One page of results plus totals."""

    content: list[T]
    page: int = Field(ge=0)
    size: int = Field(ge=1)
    total_elements: int = Field(alias="totalElements", ge=0)

    model_config = {"populate_by_name": True, "arbitrary_types_allowed": True}

    @computed_field(alias="totalPages")
    @property
    def total_pages(self) -> int:
        return -(-self.total_elements // self.size)

    @property
    def is_empty(self) -> bool:
        return not self.content

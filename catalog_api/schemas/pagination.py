"""
Pagination Pydantic Schemas

PageResponse is generic over the item schema, so the same envelope is
used for users and books:

    GET /api/books/paged?page=2&pageSize=2
    {
        "data": [...],
        "currentPage": 2,
        "previousPage": 1,
        "nextPage": 3,
        "totalCount": 5,
        "totalPages": 3
    }
"""

from typing import Any, Generic, TypeVar

from pydantic import Field

from catalog_api.schemas.user import CamelModel

T = TypeVar("T")


class PageResponse(CamelModel, Generic[T]):
    """One page of results plus navigation metadata."""

    data: list[T] = Field(..., description="Items on this page, in store order")
    current_page: int = Field(..., ge=1, description="Current page number")
    previous_page: int | None = Field(
        default=None,
        description="Previous page number, null on the first page",
    )
    next_page: int | None = Field(
        default=None,
        description="Next page number, null on the last page",
    )
    total_count: int = Field(..., ge=0, description="Number of items across all pages")
    total_pages: int = Field(..., ge=1, description="Number of pages (at least 1)")

    @classmethod
    def from_page(cls, page: Any, data: list[Any]) -> "PageResponse[T]":
        """
        Build the response envelope from a computed page window.

        Args:
            page: catalog_api.services.pagination.Page
            data: The page's items already converted to response schemas
        """
        return cls(
            data=data,
            current_page=page.current_page,
            previous_page=page.previous_page,
            next_page=page.next_page,
            total_count=page.total_count,
            total_pages=page.total_pages,
        )

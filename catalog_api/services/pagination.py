"""
Pagination Service

One page-window algorithm shared by the user listing and the book
listing. It works on an already-ordered sequence and has no state.

Rules:
- page and page_size must both be >= 1
- total_pages = max(1, ceil(total / page_size)), so an empty collection
  still has exactly one (empty) page
- requesting a page beyond total_pages is an error
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from catalog_api.exceptions import InvalidInputError

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """A computed page window. Never persisted."""

    data: list[T]
    current_page: int
    previous_page: int | None
    next_page: int | None
    total_count: int
    total_pages: int


def validate_page_params(page: int, page_size: int) -> None:
    """
    Reject non-positive page numbers or sizes.

    Raises:
        InvalidInputError: If either value is < 1
    """
    if page <= 0 or page_size <= 0:
        raise InvalidInputError("Both 'page' and 'pageSize' must be greater than zero.")


def paginate(items: Sequence[T], page: int, page_size: int) -> Page[T]:
    """
    Slice one page out of an ordered sequence.

    Args:
        items: The full collection, already in the desired order
        page: 1-based page number
        page_size: Maximum number of items per page

    Returns:
        Page with the slice and previous/next page numbers

    Raises:
        InvalidInputError: On non-positive arguments or a page past the end

    Example:
        >>> paginate([1, 2, 3, 4, 5], page=3, page_size=2).data
        [5]
    """
    validate_page_params(page, page_size)

    total_count = len(items)
    total_pages = max(1, math.ceil(total_count / page_size))

    if page > total_pages:
        raise InvalidInputError(
            f"Requested page '{page}' exceeds total pages '{total_pages}'."
        )

    start_index = (page - 1) * page_size
    take_count = min(page_size, max(0, total_count - start_index))
    data = list(items[start_index:start_index + take_count]) if start_index < total_count else []

    return Page(
        data=data,
        current_page=page,
        previous_page=page - 1 if page > 1 else None,
        next_page=page + 1 if page < total_pages else None,
        total_count=total_count,
        total_pages=total_pages,
    )

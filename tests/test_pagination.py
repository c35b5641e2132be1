"""
Tests for the Pagination Service

The page-window algorithm is pure, so these tests need no database.
"""

import pytest

from catalog_api.exceptions import InvalidInputError
from catalog_api.services.pagination import paginate


class TestPageWindow:
    """Slicing and navigation metadata."""

    def test_first_page(self):
        page = paginate(list(range(1, 6)), page=1, page_size=2)

        assert page.data == [1, 2]
        assert page.current_page == 1
        assert page.previous_page is None
        assert page.next_page == 2
        assert page.total_count == 5
        assert page.total_pages == 3

    def test_middle_page(self):
        page = paginate(list(range(1, 6)), page=2, page_size=2)

        assert page.data == [3, 4]
        assert page.previous_page == 1
        assert page.next_page == 3

    def test_last_partial_page(self):
        page = paginate(list(range(1, 6)), page=3, page_size=2)

        assert page.data == [5]
        assert page.previous_page == 2
        assert page.next_page is None

    def test_page_size_larger_than_collection(self):
        page = paginate(["a", "b"], page=1, page_size=10)

        assert page.data == ["a", "b"]
        assert page.total_pages == 1
        assert page.next_page is None

    def test_empty_collection_has_one_empty_page(self):
        page = paginate([], page=1, page_size=10)

        assert page.data == []
        assert page.total_pages == 1
        assert page.previous_page is None
        assert page.next_page is None

    def test_preserves_order(self):
        items = ["z", "a", "m", "b"]
        page = paginate(items, page=1, page_size=3)

        assert page.data == ["z", "a", "m"]


class TestPageTotality:
    """Consecutive pages cover the collection exactly once."""

    @pytest.mark.parametrize("total", [0, 1, 2, 7, 10, 11])
    @pytest.mark.parametrize("page_size", [1, 3, 10])
    def test_pages_concatenate_to_full_collection(self, total, page_size):
        items = list(range(total))
        first = paginate(items, page=1, page_size=page_size)

        collected = []
        for number in range(1, first.total_pages + 1):
            page = paginate(items, page=number, page_size=page_size)
            assert len(page.data) <= page_size
            collected.extend(page.data)

        assert collected == items


class TestPageBounds:
    """Invalid arguments are rejected as input errors."""

    def test_page_zero_rejected(self):
        with pytest.raises(InvalidInputError):
            paginate([1, 2, 3], page=0, page_size=2)

    def test_page_size_zero_rejected(self):
        with pytest.raises(InvalidInputError):
            paginate([1, 2, 3], page=1, page_size=0)

    def test_negative_values_rejected(self):
        with pytest.raises(InvalidInputError):
            paginate([1, 2, 3], page=-1, page_size=-5)

    def test_page_past_end_rejected(self):
        with pytest.raises(InvalidInputError) as exc_info:
            paginate([1, 2, 3], page=3, page_size=2)

        assert "exceeds total pages" in exc_info.value.detail

    def test_page_two_of_empty_collection_rejected(self):
        with pytest.raises(InvalidInputError):
            paginate([], page=2, page_size=10)

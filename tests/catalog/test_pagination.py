"""Tests for page slicing and page window selection."""

import pytest

from stockview.catalog import page_window, paginate
from stockview.domain import InvalidPageSizeError


class TestPaginate:
    """Tests for paginate."""

    def test_last_partial_page(self) -> None:
        """23 items at 10 per page leave 3 on page 3."""
        page = paginate(list(range(23)), page_size=10, requested_page=3)
        assert page.items == [20, 21, 22]
        assert page.total_pages == 3
        assert page.page == 3

    def test_empty_sequence_has_one_page(self) -> None:
        """An empty sequence yields an empty page 1."""
        page = paginate([], page_size=10, requested_page=1)
        assert page.items == []
        assert page.total_pages == 1
        assert page.page == 1

    @pytest.mark.parametrize(("requested", "effective"), [(0, 1), (-4, 1), (9, 3)])
    def test_requested_page_is_clamped(self, requested: int, effective: int) -> None:
        """Out-of-range requests clamp to the nearest valid page."""
        assert paginate(list(range(23)), 10, requested).page == effective

    @pytest.mark.parametrize(("length", "size"), [(0, 3), (1, 1), (9, 3), (10, 3), (57, 10)])
    def test_pages_reconstruct_sequence(self, length: int, size: int) -> None:
        """Concatenating every page gives back the sequence exactly once."""
        items = list(range(length))
        total = paginate(items, size).total_pages
        rebuilt = []
        for number in range(1, total + 1):
            rebuilt.extend(paginate(items, size, number).items)
        assert rebuilt == items

    def test_invalid_page_size(self) -> None:
        """Page size must be positive."""
        with pytest.raises(InvalidPageSizeError):
            paginate([1, 2], page_size=0)

    def test_navigation_at_edges(self) -> None:
        """Previous and next stay put at the ends."""
        first = paginate(list(range(25)), 10, 1)
        last = paginate(list(range(25)), 10, 3)
        assert not first.has_previous and first.previous_page == 1
        assert first.has_next and first.next_page == 2
        assert not last.has_next and last.next_page == 3
        assert last.has_previous and last.previous_page == 2

    def test_showing_range(self) -> None:
        """Item numbers describe the visible range."""
        page = paginate(list(range(23)), 10, 2)
        assert (page.first_item_number, page.last_item_number) == (11, 20)
        assert page.total_items == 23

    def test_showing_range_empty(self) -> None:
        """An empty page shows no range."""
        page = paginate([], 10)
        assert (page.first_item_number, page.last_item_number) == (0, 0)

    def test_needs_navigation(self) -> None:
        """Navigation is only needed when items overflow one page."""
        assert not paginate(list(range(10)), 10).needs_navigation
        assert paginate(list(range(11)), 10).needs_navigation


class TestPageWindow:
    """Tests for page button selection."""

    @pytest.mark.parametrize(
        ("current", "total", "expected"),
        [
            (1, 1, [1]),
            (2, 3, [1, 2, 3]),
            (5, 5, [1, 2, 3, 4, 5]),
            (1, 10, [1, 2, 3, 4, 5]),
            (3, 10, [1, 2, 3, 4, 5]),
            (4, 10, [2, 3, 4, 5, 6]),
            (6, 10, [4, 5, 6, 7, 8]),
            (7, 10, [5, 6, 7, 8, 9]),
            (8, 10, [6, 7, 8, 9, 10]),
            (10, 10, [6, 7, 8, 9, 10]),
            (4, 6, [2, 3, 4, 5, 6]),
        ],
    )
    def test_window(self, current: int, total: int, expected: list[int]) -> None:
        """At most five buttons, centered when possible."""
        assert page_window(current, total) == expected

    def test_page_exposes_window(self) -> None:
        """A page knows its own button window."""
        assert paginate(list(range(100)), 10, 6).window == [4, 5, 6, 7, 8]

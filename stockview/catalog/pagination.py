"""Page slicing for the filtered catalog.

Pages are 1-indexed. An empty sequence still has one (empty) page so the
current page is always a valid page number.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from stockview.domain.exceptions import InvalidPageSizeError

T = TypeVar("T")

PAGE_WINDOW_WIDTH = 5


def total_pages_for(total_items: int, page_size: int) -> int:
    """Number of pages needed for total_items, at least 1."""
    if page_size < 1:
        raise InvalidPageSizeError(page_size)
    return max(1, math.ceil(total_items / page_size))


def clamp_page(requested_page: int, total_pages: int) -> int:
    """Clamp a requested page number into [1, total_pages]."""
    return min(max(1, requested_page), max(1, total_pages))


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a sequence.

    Attributes:
        items: Items on this page.
        page: Effective page number (1-indexed, clamped).
        page_size: Items per page.
        total_items: Length of the whole sequence.
        total_pages: Number of pages, at least 1.
    """

    items: list[T]
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        """Check if there's a previous page."""
        return self.page > 1

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.page < self.total_pages

    @property
    def previous_page(self) -> int:
        """Page number for "previous"; stays put on the first page."""
        return max(1, self.page - 1)

    @property
    def next_page(self) -> int:
        """Page number for "next"; stays put on the last page."""
        return min(self.total_pages, self.page + 1)

    @property
    def first_item_number(self) -> int:
        """1-based position of the first item shown, 0 when empty."""
        if not self.items:
            return 0
        return (self.page - 1) * self.page_size + 1

    @property
    def last_item_number(self) -> int:
        """1-based position of the last item shown, 0 when empty."""
        if not self.items:
            return 0
        return self.first_item_number + len(self.items) - 1

    @property
    def needs_navigation(self) -> bool:
        """True when the sequence does not fit on a single page."""
        return self.total_items > self.page_size

    @property
    def window(self) -> list[int]:
        """Page numbers for the navigation buttons."""
        return page_window(self.page, self.total_pages)


def paginate(items: Sequence[T], page_size: int, requested_page: int = 1) -> Page[T]:
    """Slice one page out of a sequence.

    Args:
        items: The full (filtered) sequence.
        page_size: Items per page, at least 1.
        requested_page: Desired page; clamped into the valid range.

    Returns:
        The page with its metadata.

    Raises:
        InvalidPageSizeError: If page_size is below 1.
    """
    total_pages = total_pages_for(len(items), page_size)
    page = clamp_page(requested_page, total_pages)
    start = (page - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        page=page,
        page_size=page_size,
        total_items=len(items),
        total_pages=total_pages,
    )


def page_window(
    current_page: int,
    total_pages: int,
    width: int = PAGE_WINDOW_WIDTH,
) -> list[int]:
    """Select which page numbers to show as navigation buttons.

    Shows the first pages near the start, the last pages near the end,
    and otherwise a window centered on the current page.

    Example:
        >>> page_window(6, 10)
        [4, 5, 6, 7, 8]
        >>> page_window(9, 10)
        [6, 7, 8, 9, 10]
    """
    total_pages = max(1, total_pages)
    count = min(width, total_pages)
    half = width // 2

    if total_pages <= width or current_page <= half + 1:
        first = 1
    elif current_page >= total_pages - half:
        first = total_pages - width + 1
    else:
        first = current_page - half

    return list(range(first, first + count))

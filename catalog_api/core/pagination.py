"""Pagination — pure page arithmetic for list endpoints.

Invariants:
    - total_pages = ceil(total_items / page_size) for page_size > 0
    - Page K covers the (K-1)*P .. K*P-1 slice of the ordered result
    - pageNumber/pageSize are never rejected here (the HTTP layer bounds them
      to 32 bits); non-positive values yield an empty page (page_size <= 0)
      or clamp the offset to 0 (page_number <= 0)

Design Decisions:
    - Pure functions, no IO: repositories receive (offset, limit) already computed
    - Clamping instead of raising: SQL engines reject negative OFFSET/LIMIT, and
      callers are allowed to pass nonsense without getting a 4xx
"""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10

ItemT = TypeVar("ItemT")


@dataclass(frozen=True)
class PageWindow:
    """Resolved OFFSET/LIMIT for a page request."""
    offset: int
    limit: int


@dataclass(frozen=True)
class PageResult(Generic[ItemT]):
    """One page of an ordered, filtered result plus its metadata."""
    total_items: int
    page_number: int
    page_size: int
    total_pages: int
    items: list[ItemT]


def page_window(page_number: int, page_size: int) -> PageWindow:
    """Translate 1-based page coordinates into OFFSET/LIMIT. Pure, no IO."""
    limit = max(page_size, 0)
    offset = max((page_number - 1) * page_size, 0)
    return PageWindow(offset=offset, limit=limit)


def total_pages(total_items: int, page_size: int) -> int:
    """Ceiling division; zero pages when page_size is not positive."""
    if page_size <= 0:
        return 0
    return math.ceil(total_items / page_size)

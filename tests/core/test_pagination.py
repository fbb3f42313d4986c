"""Pagination — pure page arithmetic.

Tests:
    - total_pages is ceiling division and 0 for non-positive page sizes
    - page_window maps page K to the (K-1)*P offset
    - Non-positive inputs never produce a negative OFFSET or LIMIT
"""

import pytest

from catalog_api.core.pagination import PageWindow, page_window, total_pages


@pytest.mark.parametrize(
    ("total_items", "page_size", "expected"),
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (15, 10, 2), (12, 5, 3)],
)
def test_total_pages_is_ceiling_division(total_items, page_size, expected):
    assert total_pages(total_items, page_size) == expected


def test_total_pages_zero_for_non_positive_page_size():
    assert total_pages(15, 0) == 0
    assert total_pages(15, -3) == 0


def test_page_window_second_page():
    assert page_window(2, 10) == PageWindow(offset=10, limit=10)


def test_page_window_first_page_starts_at_zero():
    assert page_window(1, 25) == PageWindow(offset=0, limit=25)


def test_page_window_clamps_offset_for_page_zero_and_negative():
    assert page_window(0, 10).offset == 0
    assert page_window(-4, 10).offset == 0


def test_page_window_non_positive_size_means_empty_page():
    assert page_window(3, 0) == PageWindow(offset=0, limit=0)
    assert page_window(2, -5).limit == 0

"""Paging — count-then-slice helper shared by the list operations.

Invariants:
    - total_items is counted over the filtered set BEFORE the page window is applied
    - The same predicates feed both the count and the page query
"""

from typing import Any, Sequence, TypeVar

from catalog_api.core.pagination import PageResult, page_window, total_pages
from catalog_api.core.repository_protocols import SoftDeleteRepository

ModelT = TypeVar("ModelT")


async def fetch_page(
    repo: SoftDeleteRepository[ModelT],
    predicates: Sequence[Any],
    order_by: Sequence[Any],
    page_number: int,
    page_size: int,
) -> PageResult[ModelT]:
    total = await repo.count(predicates)
    window = page_window(page_number, page_size)
    items = await repo.find_many(
        predicates, order_by, offset=window.offset, limit=window.limit,
    )
    return PageResult(
        total_items=total,
        page_number=page_number,
        page_size=page_size,
        total_pages=total_pages(total, page_size),
        items=items,
    )

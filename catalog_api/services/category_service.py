"""Category Service — list/get/create/update/soft-delete for categories.

Invariants:
    - get/update/delete treat missing and soft-deleted rows identically (404)
    - update checks path id == body id BEFORE touching storage (400 regardless of existence)
    - update overwrites name and is_deleted wholesale
    - A commit conflict is downgraded to 404 only when the row is no longer
      visible; otherwise the ConcurrencyError propagates (500)

Design Decisions:
    - Name filter is a case-sensitive substring match (LIKE with autoescape)
    - No sortBy and sortBy=id both order by id ascending, ignoring sortDesc;
      sortBy=name honours sortDesc with id as a stable tiebreaker
"""

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.domain_types import CategoryId, CategorySortKey
from catalog_api.core.errors import (
    ConcurrencyError, IdentifierMismatchError, ResourceNotFoundError,
)
from catalog_api.core.pagination import (
    DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE, PageResult,
)
from catalog_api.models.category import Category
from catalog_api.repositories.catalog import CategoryRepository
from catalog_api.schemas.category import CategoryBody
from catalog_api.services.paging import fetch_page

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryListQuery:
    name: str | None = None
    sort_by: CategorySortKey | None = None
    sort_desc: bool = False
    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE


def category_order(sort_by: CategorySortKey | None, sort_desc: bool) -> list:
    # sortDesc only applies to name; every other ordering is id ascending
    if sort_by is not CategorySortKey.NAME:
        return [Category.id.asc()]
    primary = Category.name.desc() if sort_desc else Category.name.asc()
    return [primary, Category.id.asc()]


class CategoryService:
    """Category endpoint semantics over CategoryRepository."""

    def __init__(self, db: AsyncSession):
        self.repo = CategoryRepository(db)

    async def list_page(self, query: CategoryListQuery) -> PageResult[Category]:
        predicates = []
        if query.name:
            predicates.append(Category.name.contains(query.name, autoescape=True))
        return await fetch_page(
            self.repo, predicates,
            category_order(query.sort_by, query.sort_desc),
            query.page_number, query.page_size,
        )

    async def get(self, category_id: CategoryId) -> Category:
        category = await self.repo.find_by_id(category_id)
        if category is None:
            raise ResourceNotFoundError("Category", category_id)
        return category

    async def create(self, body: CategoryBody) -> Category:
        category = await self.repo.insert(
            Category(name=body.name, is_deleted=body.is_deleted),
        )
        logger.info(
            f"Category {category.id} created",
            extra={"entity": "Category", "entity_id": category.id},
        )
        return category

    async def update(self, category_id: CategoryId, body: CategoryBody) -> None:
        if body.id != category_id:
            raise IdentifierMismatchError("Category", category_id, body.id)
        existing = await self.get(category_id)
        try:
            await self.repo.update_whole(
                existing, name=body.name, is_deleted=body.is_deleted,
            )
        except ConcurrencyError:
            if not await self.repo.exists(category_id):
                raise ResourceNotFoundError("Category", category_id)
            raise
        logger.info(
            f"Category {category_id} updated",
            extra={"entity": "Category", "entity_id": category_id},
        )

    async def delete(self, category_id: CategoryId) -> None:
        existing = await self.get(category_id)
        await self.repo.mark_deleted(existing)
        logger.info(
            f"Category {category_id} soft-deleted",
            extra={"entity": "Category", "entity_id": category_id},
        )

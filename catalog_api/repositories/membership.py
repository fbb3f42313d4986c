"""Membership Repository — product↔category links over the product_categories join table.

Invariants:
    - categories_of never returns soft-deleted categories
    - link is idempotent (existing pair → False, nothing written), including
      when a concurrent request inserts the same pair between check and commit
    - unlink of a missing pair → False, nothing written

Design Decisions:
    - Existence of both endpoints checked by the service, not here: this
      repository only knows about join rows
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.models.category import Category
from catalog_api.models.product_category import ProductCategory


class ProductCategoryRepository:
    """Join-row persistence for product category membership."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def categories_of(self, product_id: int) -> list[Category]:
        result = await self.db.execute(
            select(Category)
            .join(ProductCategory, ProductCategory.category_id == Category.id)
            .where(ProductCategory.product_id == product_id)
            .where(Category.is_deleted.is_(False))
            .order_by(Category.id.asc()),
        )
        return list(result.scalars().all())

    async def link(self, product_id: int, category_id: int) -> bool:
        existing = await self.db.get(ProductCategory, (product_id, category_id))
        if existing is not None:
            return False
        self.db.add(ProductCategory(product_id=product_id, category_id=category_id))
        try:
            await self.db.commit()
        except IntegrityError:
            # a concurrent link committed the same pair first
            await self.db.rollback()
            return False
        return True

    async def unlink(self, product_id: int, category_id: int) -> bool:
        existing = await self.db.get(ProductCategory, (product_id, category_id))
        if existing is None:
            return False
        await self.db.delete(existing)
        await self.db.commit()
        return True

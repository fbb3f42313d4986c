"""Product Service — list/get/create/update/soft-delete plus category membership.

Invariants:
    - get/update/delete treat missing and soft-deleted rows identically (404)
    - update checks path id == body id BEFORE touching storage (400 regardless of existence)
    - update overwrites name, description, price and is_deleted wholesale
    - min_price / max_price are inclusive bounds; no check that min <= max
    - Membership operations require both product and category to be active

Design Decisions:
    - Same conflict policy as CategoryService: 404 if the row vanished, else propagate
    - Price values are never validated (negative prices are stored as given)
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.domain_types import CategoryId, ProductId, ProductSortKey
from catalog_api.core.errors import (
    ConcurrencyError, IdentifierMismatchError, ResourceNotFoundError,
)
from catalog_api.core.repository_protocols import MembershipRepository
from catalog_api.core.pagination import (
    DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE, PageResult,
)
from catalog_api.models.category import Category
from catalog_api.models.product import Product
from catalog_api.repositories.catalog import CategoryRepository, ProductRepository
from catalog_api.repositories.membership import ProductCategoryRepository
from catalog_api.schemas.product import ProductBody
from catalog_api.services.paging import fetch_page

logger = logging.getLogger(__name__)

_SORT_COLUMNS = {
    ProductSortKey.ID: Product.id,
    ProductSortKey.NAME: Product.name,
    ProductSortKey.PRICE: Product.price,
}


@dataclass(frozen=True)
class ProductListQuery:
    name: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    sort_by: ProductSortKey | None = None
    sort_desc: bool = False
    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE


def product_filters(query: ProductListQuery) -> list:
    predicates = []
    if query.name:
        predicates.append(Product.name.contains(query.name, autoescape=True))
    if query.min_price is not None:
        predicates.append(Product.price >= query.min_price)
    if query.max_price is not None:
        predicates.append(Product.price <= query.max_price)
    return predicates


def product_order(sort_by: ProductSortKey | None, sort_desc: bool) -> list:
    if sort_by is None:
        return [Product.id.asc()]
    column = _SORT_COLUMNS[sort_by]
    primary = column.desc() if sort_desc else column.asc()
    if sort_by is ProductSortKey.ID:
        return [primary]
    return [primary, Product.id.asc()]


class ProductService:
    """Product endpoint semantics over ProductRepository and the membership join."""

    def __init__(self, db: AsyncSession):
        self.repo = ProductRepository(db)
        self.categories = CategoryRepository(db)
        self.memberships: MembershipRepository = ProductCategoryRepository(db)

    async def list_page(self, query: ProductListQuery) -> PageResult[Product]:
        return await fetch_page(
            self.repo, product_filters(query),
            product_order(query.sort_by, query.sort_desc),
            query.page_number, query.page_size,
        )

    async def get(self, product_id: ProductId) -> Product:
        product = await self.repo.find_by_id(product_id)
        if product is None:
            raise ResourceNotFoundError("Product", product_id)
        return product

    async def create(self, body: ProductBody) -> Product:
        product = await self.repo.insert(Product(
            name=body.name,
            description=body.description,
            price=body.price,
            is_deleted=body.is_deleted,
        ))
        logger.info(
            f"Product {product.id} created",
            extra={"entity": "Product", "entity_id": product.id},
        )
        return product

    async def update(self, product_id: ProductId, body: ProductBody) -> None:
        if body.id != product_id:
            raise IdentifierMismatchError("Product", product_id, body.id)
        existing = await self.get(product_id)
        try:
            await self.repo.update_whole(
                existing,
                name=body.name,
                description=body.description,
                price=body.price,
                is_deleted=body.is_deleted,
            )
        except ConcurrencyError:
            if not await self.repo.exists(product_id):
                raise ResourceNotFoundError("Product", product_id)
            raise
        logger.info(
            f"Product {product_id} updated",
            extra={"entity": "Product", "entity_id": product_id},
        )

    async def delete(self, product_id: ProductId) -> None:
        existing = await self.get(product_id)
        await self.repo.mark_deleted(existing)
        logger.info(
            f"Product {product_id} soft-deleted",
            extra={"entity": "Product", "entity_id": product_id},
        )

    # ─── Membership ─────────────────────────────────────────────

    async def categories_of(self, product_id: ProductId) -> list[Category]:
        await self.get(product_id)
        return await self.memberships.categories_of(product_id)

    async def add_to_category(self, product_id: ProductId, category_id: CategoryId) -> None:
        await self._require_pair(product_id, category_id)
        if await self.memberships.link(product_id, category_id):
            logger.info(
                f"Product {product_id} linked to category {category_id}",
                extra={"entity": "Product", "entity_id": product_id},
            )

    async def remove_from_category(self, product_id: ProductId, category_id: CategoryId) -> None:
        await self._require_pair(product_id, category_id)
        if not await self.memberships.unlink(product_id, category_id):
            raise ResourceNotFoundError(
                "ProductCategory", f"{product_id}/{category_id}",
            )
        logger.info(
            f"Product {product_id} unlinked from category {category_id}",
            extra={"entity": "Product", "entity_id": product_id},
        )

    async def _require_pair(self, product_id: ProductId, category_id: CategoryId) -> None:
        await self.get(product_id)
        if not await self.categories.exists(category_id):
            raise ResourceNotFoundError("Category", category_id)

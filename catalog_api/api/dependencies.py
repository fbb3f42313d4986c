"""Route Dependencies — per-request service construction and bounded integer parameters.

Invariants:
    - Path ids, pageNumber and pageSize are rejected (400) outside the 32-bit
      range before any query is built
"""

from typing import Annotated

from fastapi import Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.core.domain_types import INT32_MAX, INT32_MIN
from catalog_api.infrastructure.database import get_db
from catalog_api.services.category_service import CategoryService
from catalog_api.services.product_service import ProductService

RowIdPath = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]
PageNumberQuery = Annotated[
    int, Query(alias="pageNumber", ge=INT32_MIN, le=INT32_MAX),
]
PageSizeQuery = Annotated[
    int, Query(alias="pageSize", ge=INT32_MIN, le=INT32_MAX),
]


async def get_category_service(
    db: AsyncSession = Depends(get_db),
) -> CategoryService:
    return CategoryService(db)


async def get_product_service(
    db: AsyncSession = Depends(get_db),
) -> ProductService:
    return ProductService(db)

"""Products Routes — CRUD, filtered listing and category membership under /api/products.

Invariants:
    - GET list filters: name (substring), minPrice/maxPrice (inclusive)
    - POST returns 201 with a Location header pointing at GET /api/products/{id}
    - PUT and DELETE return 204 with an empty body on success
    - Membership routes 404 when either the product or the category is missing/deleted
"""

import logging
from decimal import Decimal

from fastapi import APIRouter, Depends, Query, Request, Response, status

from catalog_api.api.dependencies import (
    PageNumberQuery, PageSizeQuery, RowIdPath, get_product_service,
)
from catalog_api.core.domain_types import ProductSortKey, parse_sort_key
from catalog_api.core.pagination import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE
from catalog_api.schemas.category import CategoryRead
from catalog_api.schemas.common import Page
from catalog_api.schemas.product import ProductBody, ProductRead
from catalog_api.services.product_service import (
    ProductListQuery, ProductService,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=Page[ProductRead])
async def list_products(
    name: str | None = Query(None),
    min_price: Decimal | None = Query(None, alias="minPrice"),
    max_price: Decimal | None = Query(None, alias="maxPrice"),
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_desc: bool = Query(False, alias="sortDesc"),
    page_number: PageNumberQuery = DEFAULT_PAGE_NUMBER,
    page_size: PageSizeQuery = DEFAULT_PAGE_SIZE,
    service: ProductService = Depends(get_product_service),
):
    """List active products with name/price filters, sorting and pagination."""
    page = await service.list_page(ProductListQuery(
        name=name,
        min_price=min_price,
        max_price=max_price,
        sort_by=parse_sort_key(sort_by, ProductSortKey),
        sort_desc=sort_desc,
        page_number=page_number,
        page_size=page_size,
    ))
    return Page[ProductRead](
        total_items=page.total_items,
        page_number=page.page_number,
        page_size=page.page_size,
        total_pages=page.total_pages,
        items=[ProductRead.model_validate(p) for p in page.items],
    )


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(
    product_id: RowIdPath,
    service: ProductService = Depends(get_product_service),
):
    return await service.get(product_id)


@router.post(
    "", response_model=ProductRead, status_code=status.HTTP_201_CREATED,
)
async def create_product(
    body: ProductBody,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service),
):
    """Create a product; the id is always assigned by storage."""
    product = await service.create(body)
    response.headers["Location"] = str(
        request.url_for("get_product", product_id=product.id),
    )
    return product


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_product(
    product_id: RowIdPath,
    body: ProductBody,
    service: ProductService = Depends(get_product_service),
) -> None:
    """Overwrite a product wholesale. Body id must equal path id."""
    await service.update(product_id, body)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: RowIdPath,
    service: ProductService = Depends(get_product_service),
) -> None:
    """Soft-delete a product (row retained, flag set)."""
    await service.delete(product_id)


# ─── Membership ─────────────────────────────────────────────────

@router.get("/{product_id}/categories", response_model=list[CategoryRead])
async def list_product_categories(
    product_id: RowIdPath,
    service: ProductService = Depends(get_product_service),
):
    """Active categories the product belongs to, ordered by id."""
    return await service.categories_of(product_id)


@router.put(
    "/{product_id}/categories/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def add_product_to_category(
    product_id: RowIdPath,
    category_id: RowIdPath,
    service: ProductService = Depends(get_product_service),
) -> None:
    await service.add_to_category(product_id, category_id)


@router.delete(
    "/{product_id}/categories/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def remove_product_from_category(
    product_id: RowIdPath,
    category_id: RowIdPath,
    service: ProductService = Depends(get_product_service),
) -> None:
    await service.remove_from_category(product_id, category_id)

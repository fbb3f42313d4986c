"""Categories Routes — CRUD + filtered, sorted, paginated listing under /api/categories.

Invariants:
    - GET list always returns the paginated envelope, even when empty
    - POST returns 201 with a Location header pointing at GET /api/categories/{id}
    - PUT and DELETE return 204 with an empty body on success
    - Unknown sortBy values are rejected with 400 (INVALID_SORT_KEY)
"""

import logging

from fastapi import APIRouter, Depends, Query, Request, Response, status

from catalog_api.api.dependencies import (
    PageNumberQuery, PageSizeQuery, RowIdPath, get_category_service,
)
from catalog_api.core.domain_types import CategorySortKey, parse_sort_key
from catalog_api.core.pagination import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE
from catalog_api.schemas.category import CategoryBody, CategoryRead
from catalog_api.schemas.common import Page
from catalog_api.services.category_service import (
    CategoryListQuery, CategoryService,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=Page[CategoryRead])
async def list_categories(
    name: str | None = Query(None),
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_desc: bool = Query(False, alias="sortDesc"),
    page_number: PageNumberQuery = DEFAULT_PAGE_NUMBER,
    page_size: PageSizeQuery = DEFAULT_PAGE_SIZE,
    service: CategoryService = Depends(get_category_service),
):
    """List active categories with name filter, sorting and pagination."""
    page = await service.list_page(CategoryListQuery(
        name=name,
        sort_by=parse_sort_key(sort_by, CategorySortKey),
        sort_desc=sort_desc,
        page_number=page_number,
        page_size=page_size,
    ))
    return Page[CategoryRead](
        total_items=page.total_items,
        page_number=page.page_number,
        page_size=page.page_size,
        total_pages=page.total_pages,
        items=[CategoryRead.model_validate(c) for c in page.items],
    )


@router.get("/{category_id}", response_model=CategoryRead)
async def get_category(
    category_id: RowIdPath,
    service: CategoryService = Depends(get_category_service),
):
    return await service.get(category_id)


@router.post(
    "", response_model=CategoryRead, status_code=status.HTTP_201_CREATED,
)
async def create_category(
    body: CategoryBody,
    request: Request,
    response: Response,
    service: CategoryService = Depends(get_category_service),
):
    """Create a category; the id is always assigned by storage."""
    category = await service.create(body)
    response.headers["Location"] = str(
        request.url_for("get_category", category_id=category.id),
    )
    return category


@router.put("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_category(
    category_id: RowIdPath,
    body: CategoryBody,
    service: CategoryService = Depends(get_category_service),
) -> None:
    """Overwrite a category wholesale. Body id must equal path id."""
    await service.update(category_id, body)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: RowIdPath,
    service: CategoryService = Depends(get_category_service),
) -> None:
    """Soft-delete a category (row retained, flag set)."""
    await service.delete(category_id)

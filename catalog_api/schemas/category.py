"""Category Schemas — request body and response shape for /api/categories."""

from catalog_api.schemas.common import CamelModel


class CategoryBody(CamelModel):
    """Create/update payload. id is ignored on create, must match the path on update."""
    id: int | None = None
    name: str | None = None
    is_deleted: bool = False


class CategoryRead(CamelModel):
    id: int
    name: str | None
    is_deleted: bool

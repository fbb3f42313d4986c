"""Product Schemas — request body and response shape for /api/products.

Invariants:
    - price is Decimal on input, JSON number on output
    - price is rounded half-up to cents; more than 13 integer digits → 400
    - No lower bound on price: negative values are stored as given
"""

from decimal import Decimal

from catalog_api.schemas.common import CamelModel, Money


class ProductBody(CamelModel):
    """Create/update payload. id is ignored on create, must match the path on update."""
    id: int | None = None
    name: str | None = None
    description: str | None = None
    price: Money = Decimal("0")
    is_deleted: bool = False


class ProductRead(CamelModel):
    id: int
    name: str | None
    description: str | None
    price: Money
    is_deleted: bool

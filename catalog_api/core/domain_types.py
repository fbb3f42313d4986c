"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CategoryId, ProductId wrap ints — server-assigned, immutable after creation
    - Ids and page parameters outside the 32-bit range never reach the database
    - Sort keys encoded as Enums — no raw string matching in query building
    - parse_sort_key is case-insensitive and rejects unknown keys explicitly

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - Absent sortBy resolves to None (caller orders by id ascending); an unknown
      sortBy raises instead of silently falling back to id order
"""

from enum import Enum
from typing import NewType, TypeVar

from catalog_api.core.errors import InvalidSortKeyError


# ─── Identity Types ──────────────────────────────────────────────

CategoryId = NewType("CategoryId", int)
ProductId = NewType("ProductId", int)

# Storage ids and page parameters are 32-bit signed integers
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


# ─── Enums ───────────────────────────────────────────────────────

class CategorySortKey(str, Enum):
    """Columns a category listing may be ordered by."""
    ID = "id"
    NAME = "name"


class ProductSortKey(str, Enum):
    """Columns a product listing may be ordered by."""
    ID = "id"
    NAME = "name"
    PRICE = "price"


SortKeyT = TypeVar("SortKeyT", CategorySortKey, ProductSortKey)


def parse_sort_key(raw: str | None, key_type: type[SortKeyT]) -> SortKeyT | None:
    """Resolve a sortBy query value into its enum member. Pure, no IO."""
    if raw is None or raw == "":
        return None
    try:
        return key_type(raw.lower())
    except ValueError:
        raise InvalidSortKeyError(raw, [k.value for k in key_type]) from None

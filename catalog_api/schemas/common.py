"""Common Schemas — camelCase base model and the paginated envelope.

Invariants:
    - Every schema accepts both camelCase aliases and snake_case field names
    - Page.total_pages is computed by core/pagination, never by the client

Design Decisions:
    - alias_generator=to_camel over per-field aliases: one rule for the whole API
    - from_attributes=True: responses validate straight from ORM rows
    - Money is capped at 13 integer digits plus cents (Numeric(15, 2)); every
      value in that range survives the trip through a JSON float unchanged
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated, Generic, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

ItemT = TypeVar("ItemT")

PRICE_INTEGER_DIGITS = 13
_PRICE_LIMIT = Decimal(10) ** PRICE_INTEGER_DIGITS
_CENT = Decimal("0.01")


def _to_cents(value: Decimal) -> Decimal:
    """Round to cents, rejecting amounts wider than the price column."""
    if abs(value) < _PRICE_LIMIT:
        cents = value.quantize(_CENT, rounding=ROUND_HALF_UP)
        if abs(cents) < _PRICE_LIMIT:
            return cents
    raise ValueError(
        f"price must have at most {PRICE_INTEGER_DIGITS} integer digits",
    )


# At most 15 significant digits, so the JSON float is exact
Money = Annotated[
    Decimal,
    AfterValidator(_to_cents),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class CamelModel(BaseModel):
    """Base for all API schemas."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Page(CamelModel, Generic[ItemT]):
    """Paginated envelope — page metadata plus the current page's items."""
    total_items: int
    page_number: int
    page_size: int
    total_pages: int
    items: list[ItemT]

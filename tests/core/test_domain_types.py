"""Domain Types — sort-key enums and boundary parsing.

Tests:
    - Sort-key enums have exactly the supported members
    - parse_sort_key is case-insensitive, maps absent to None, rejects unknowns
"""

import pytest

from catalog_api.core.domain_types import (
    CategoryId, ProductId,
    CategorySortKey, ProductSortKey, parse_sort_key,
)
from catalog_api.core.errors import InvalidSortKeyError


def test_identity_types_wrap_int():
    assert CategoryId(3) == 3
    assert ProductId(4) == 4


def test_category_sort_keys():
    assert {k.value for k in CategorySortKey} == {"id", "name"}


def test_product_sort_keys():
    assert {k.value for k in ProductSortKey} == {"id", "name", "price"}


@pytest.mark.parametrize("raw", ["price", "PRICE", "Price"])
def test_parse_sort_key_is_case_insensitive(raw):
    assert parse_sort_key(raw, ProductSortKey) is ProductSortKey.PRICE


@pytest.mark.parametrize("raw", [None, ""])
def test_parse_sort_key_absent_is_none(raw):
    assert parse_sort_key(raw, CategorySortKey) is None


def test_parse_sort_key_rejects_key_of_other_entity():
    with pytest.raises(InvalidSortKeyError) as exc_info:
        parse_sort_key("price", CategorySortKey)
    assert exc_info.value.allowed == ["id", "name"]
    assert exc_info.value.http_status == 400

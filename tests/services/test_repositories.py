"""Soft-Delete Repository — explicit soft-delete predicate on every read.

Invariants:
    - find_by_id, exists, find_many and count skip is_deleted rows
    - find_many honours predicates, ordering, offset and limit
    - update_whole bumps the version column; mark_deleted keeps the row
"""

from sqlalchemy import select

from catalog_api.models.category import Category
from catalog_api.models.product import Product
from catalog_api.repositories.catalog import CategoryRepository, ProductRepository


async def test_find_by_id_skips_soft_deleted(test_db, seed_categories):
    await seed_categories("Live", {"name": "Gone", "is_deleted": True})
    repo = CategoryRepository(test_db)

    assert (await repo.find_by_id(1)).name == "Live"
    assert await repo.find_by_id(2) is None
    assert await repo.exists(1) is True
    assert await repo.exists(2) is False
    assert await repo.exists(3) is False


async def test_find_many_and_count_apply_predicates(test_db, seed_products):
    await seed_products(
        {"name": "a", "price": 1},
        {"name": "b", "price": 2},
        {"name": "c", "price": 3, "is_deleted": True},
        {"name": "d", "price": 4},
    )
    repo = ProductRepository(test_db)

    predicates = [Product.price >= 2]
    assert await repo.count(predicates) == 2
    rows = await repo.find_many(predicates, [Product.price.desc()])
    assert [p.name for p in rows] == ["d", "b"]

    page = await repo.find_many((), [Product.id.asc()], offset=1, limit=1)
    assert [p.name for p in page] == ["b"]
    assert await repo.find_many((), [Product.id.asc()], limit=0) == []


async def test_insert_assigns_id_and_initial_version(test_db):
    repo = CategoryRepository(test_db)

    category = await repo.insert(Category(name="Tools", is_deleted=False))

    assert category.id == 1
    assert category.version == 1


async def test_update_whole_bumps_version(test_db, seed_categories):
    await seed_categories("Tools")
    repo = CategoryRepository(test_db)
    category = await repo.find_by_id(1)

    await repo.update_whole(category, name="Hand Tools", is_deleted=False)

    assert category.version == 2
    assert category.name == "Hand Tools"


async def test_mark_deleted_keeps_row(test_db, seed_categories, test_session_factory):
    await seed_categories("Tools")
    repo = CategoryRepository(test_db)

    await repo.mark_deleted(await repo.find_by_id(1))

    async with test_session_factory() as other:
        row = (await other.execute(select(Category).where(Category.id == 1))).scalar_one()
    assert row.is_deleted is True
    assert await repo.count() == 0

"""ORM Models — SQLAlchemy declarative models for all catalog entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Category and Product are soft-deletable; ProductCategory is a plain join row

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from catalog_api.models.category import Category  # noqa: F401
from catalog_api.models.product import Product  # noqa: F401
from catalog_api.models.product_category import ProductCategory  # noqa: F401

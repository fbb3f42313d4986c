"""Repositories — explicit SQLAlchemy data access for catalog entities.

Invariants:
    - Every read applies the soft-delete predicate explicitly (no implicit global filter)
    - Every write commits the request's session; stale rows surface as ConcurrencyError

Design Decisions:
    - One generic SoftDeleteSqlRepository parameterised by model class; Category and
      Product repositories differ only in the model they bind
"""

from catalog_api.repositories.soft_delete import SoftDeleteSqlRepository  # noqa: F401
from catalog_api.repositories.catalog import (  # noqa: F401
    CategoryRepository, ProductRepository,
)
from catalog_api.repositories.membership import ProductCategoryRepository  # noqa: F401

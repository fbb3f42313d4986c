"""Catalog Repositories — Category and Product bindings of the soft-delete repository."""

from catalog_api.models.category import Category
from catalog_api.models.product import Product
from catalog_api.repositories.soft_delete import SoftDeleteSqlRepository


class CategoryRepository(SoftDeleteSqlRepository[Category]):
    model = Category


class ProductRepository(SoftDeleteSqlRepository[Product]):
    model = Product

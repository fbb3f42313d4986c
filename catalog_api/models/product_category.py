"""ProductCategory ORM — join row recording a product's membership in a category.

Invariants:
    - Composite primary key (product_id, category_id): a pair is linked at most once
    - Both columns are foreign keys; a link always references one Product and one Category

Design Decisions:
    - Association object instead of a bare secondary Table: links are
      created and removed individually by the membership endpoints
    - ON DELETE CASCADE on both FKs: rows are never hard-deleted by the API,
      but manual cleanup must not be blocked by stale links
"""

from sqlalchemy import ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.db.base import Base


class ProductCategory(Base):
    """Product↔Category link."""
    __tablename__ = "product_categories"
    __table_args__ = (
        Index("ix_product_categories_category_id", "category_id"),
    )

    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"),
        primary_key=True,
    )
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="CASCADE"),
        primary_key=True,
    )

    product: Mapped["Product"] = relationship(
        "Product", back_populates="category_links",
    )
    category: Mapped["Category"] = relationship(
        "Category", back_populates="product_links",
    )

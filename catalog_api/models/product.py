"""Product ORM — persists a priced catalog item.

Invariants:
    - id is an integer primary key assigned by the database
    - price is Numeric(15, 2); width enforced by schemas/common.Money, sign never enforced
    - is_deleted=True rows are retained but invisible to default reads
    - version increments on every UPDATE (optimistic concurrency)

Design Decisions:
    - Numeric over Float: exact decimal arithmetic for min/max price filters
    - Same version_id_col strategy as Category
"""

from decimal import Decimal

from sqlalchemy import Boolean, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.db.base import Base


class Product(Base):
    """Product entity — belongs to any number of categories."""
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(
        Numeric(15, 2), nullable=False, default=Decimal("0"),
    )
    is_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    category_links: Mapped[list["ProductCategory"]] = relationship(
        "ProductCategory", back_populates="product",
        cascade="all, delete-orphan",
    )

    __mapper_args__ = {"version_id_col": version}

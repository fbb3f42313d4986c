"""Category ORM — persists a named grouping of products.

Invariants:
    - id is an integer primary key assigned by the database
    - is_deleted=True rows are retained but invisible to default reads
    - version increments on every UPDATE (optimistic concurrency)

Design Decisions:
    - version_id_col over row locks: a stale UPDATE matches zero rows and
      SQLAlchemy raises StaleDataError at flush time
    - Membership via ProductCategory association object (composite key)
"""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.db.base import Base


class Category(Base):
    """Category entity — groups products many-to-many."""
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    is_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    product_links: Mapped[list["ProductCategory"]] = relationship(
        "ProductCategory", back_populates="category",
        cascade="all, delete-orphan",
    )

    __mapper_args__ = {"version_id_col": version}

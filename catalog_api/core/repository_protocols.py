"""Boundary Protocols — contracts between services and storage.

Invariants:
    - Services NEVER import SQLAlchemy sessions directly — all IO through these Protocols
    - find_by_id / find_many / count never return soft-deleted rows
    - update_whole() and mark_deleted() surface a row changed or removed since load as ConcurrencyError

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Soft-delete predicate applied explicitly inside the repository instead of
      an implicit global ORM filter, so lookups by id and listings agree
    - Predicates and ordering passed as SQLAlchemy expressions: the
      repository stays generic, services own the filter semantics
"""

from typing import Any, Protocol, Sequence, TypeVar

EntityT = TypeVar("EntityT")


class SoftDeleteRepository(Protocol[EntityT]):
    """Capability set shared by the Category and Product repositories."""
    async def find_by_id(self, entity_id: int) -> EntityT | None: ...
    async def exists(self, entity_id: int) -> bool: ...
    async def find_many(
        self,
        predicates: Sequence[Any] = (),
        order_by: Sequence[Any] = (),
        offset: int = 0,
        limit: int | None = None,
    ) -> list[EntityT]: ...
    async def count(self, predicates: Sequence[Any] = ()) -> int: ...
    async def insert(self, entity: EntityT) -> EntityT: ...
    async def update_whole(self, entity: EntityT, **fields: object) -> EntityT: ...
    async def mark_deleted(self, entity: EntityT) -> EntityT: ...


class MembershipRepository(Protocol):
    """Contract for product↔category links — implemented over product_categories."""
    async def categories_of(self, product_id: int) -> list: ...
    async def link(self, product_id: int, category_id: int) -> bool: ...
    async def unlink(self, product_id: int, category_id: int) -> bool: ...

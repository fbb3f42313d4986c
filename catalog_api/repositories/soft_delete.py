"""Soft-Delete Repository — generic find/insert/update/mark-deleted over one ORM model.

Invariants:
    - find_by_id, exists, find_many and count NEVER see rows with is_deleted=True
    - update_whole overwrites exactly the fields given (wholesale, not merged)
    - A flush that matches zero rows (version moved on, or row gone) rolls back
      and raises ConcurrencyError; callers decide whether that means 404

Design Decisions:
    - Predicates/order passed in as SQLAlchemy column expressions: keeps the
      repository ignorant of filter semantics owned by services
    - Commit per write: each request performs at most one read-modify-write
"""

import logging
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from catalog_api.core.errors import ConcurrencyError, ErrorContext

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class SoftDeleteSqlRepository(Generic[ModelT]):
    """Data access for a model carrying integer `id` and boolean `is_deleted` columns."""

    model: type[ModelT]

    def __init__(self, db: AsyncSession):
        self.db = db

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def _active(self) -> Select[Any]:
        return select(self.model).where(self.model.is_deleted.is_(False))

    # ─── Reads ───────────────────────────────────────────────────

    async def find_by_id(self, entity_id: int) -> ModelT | None:
        result = await self.db.execute(
            self._active().where(self.model.id == entity_id),
        )
        return result.scalar_one_or_none()

    async def exists(self, entity_id: int) -> bool:
        result = await self.db.execute(
            select(func.count())
            .select_from(self.model)
            .where(self.model.is_deleted.is_(False))
            .where(self.model.id == entity_id),
        )
        return result.scalar_one() > 0

    async def find_many(
        self,
        predicates: Sequence[Any] = (),
        order_by: Sequence[Any] = (),
        offset: int = 0,
        limit: int | None = None,
    ) -> list[ModelT]:
        query = self._active().where(*predicates).order_by(*order_by)
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def count(self, predicates: Sequence[Any] = ()) -> int:
        result = await self.db.execute(
            select(func.count())
            .select_from(self.model)
            .where(self.model.is_deleted.is_(False))
            .where(*predicates),
        )
        return result.scalar_one()

    # ─── Writes ──────────────────────────────────────────────────

    async def insert(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        await self.db.commit()
        await self.db.refresh(entity)
        return entity

    async def update_whole(self, entity: ModelT, **fields: object) -> ModelT:
        for name, value in fields.items():
            setattr(entity, name, value)
        await self._commit_tracked(entity)
        return entity

    async def mark_deleted(self, entity: ModelT) -> ModelT:
        entity.is_deleted = True
        await self._commit_tracked(entity)
        return entity

    async def _commit_tracked(self, entity: ModelT) -> None:
        entity_id = entity.id
        try:
            await self.db.commit()
        except StaleDataError as e:
            await self.db.rollback()
            logger.warning(
                f"Stale {self.entity_name} {entity_id} on commit: {e}",
                extra={"entity": self.entity_name, "entity_id": entity_id},
            )
            raise ConcurrencyError(
                f"{self.entity_name} '{entity_id}' was modified or removed concurrently",
                ErrorContext(entity=self.entity_name, entity_id=entity_id),
            ) from e

from __future__ import annotations
from typing import Any, Generic, Sequence, TypeVar
from sqlalchemy import select, func, delete as sa_delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute
from sqlalchemy.inspection import inspect as sa_inspect

T = TypeVar("T")  # SQLAlchemy model class (Declarative)


class BaseRepository(Generic[T]):
    """
    Common async repository for SQLAlchemy 2.x models.
    - Accepts model instances only (no dicts or pydantic objects).
    - Only flushes; commit/rollback belongs to the calling service.
    """

    def __init__(self, model: type[T]) -> None:
        self.model = model

    # ------------------------ Read ------------------------

    async def get(self, session: AsyncSession, pk: Any) -> T | None:
        return await session.get(self.model, pk)

    async def list(
        self,
        session: AsyncSession,
        *,
        where: dict[str, Any] | None = None,
        order_by: Sequence[InstrumentedAttribute] | None = None,
        limit: int | None = None,
        offset: int | None = 0,
    ) -> list[T]:
        stmt = select(self.model)
        if where:
            stmt = stmt.filter_by(**where)
        if order_by:
            stmt = stmt.order_by(*order_by)
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)
        res = await session.execute(stmt)
        return list(res.scalars().all())

    async def count(self, session: AsyncSession, **filters: Any) -> int:
        stmt = select(func.count()).select_from(self.model)
        if filters:
            stmt = stmt.filter_by(**filters)
        res = await session.execute(stmt)
        return int(res.scalar_one())

    # ------------------------ Write ------------------------

    async def create(self, session: AsyncSession, obj: T) -> T:
        """
        Insert a new row. Only transient (never persisted) instances are
        accepted; the flush assigns column defaults such as the id.
        """
        state = sa_inspect(obj)
        if not state.transient:
            raise ValueError("create(): expected a transient (new) SQLAlchemy model instance")
        session.add(obj)
        await session.flush()
        return obj

    async def delete(self, session: AsyncSession, pk: Any) -> bool:
        """Delete by primary key. Returns whether a row was removed."""
        pk_cols = sa_inspect(self.model).primary_key
        if len(pk_cols) != 1:
            raise ValueError("delete(): composite primary key is not supported")
        pk_col = pk_cols[0]
        stmt = sa_delete(self.model).where(pk_col == pk)
        res = await session.execute(stmt)
        return (res.rowcount or 0) > 0

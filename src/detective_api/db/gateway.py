"""
detective_api.db.gateway

Persistence gateway: the single access point handlers use to read and write entities.

Responsibilities:
- Generic find-all / find-one / find-one-or-fail / save over any mapped model.
- Own the commit boundary for writes (each `save` is its own transaction).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from detective_api.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class EntityNotFoundError(LookupError):
    """Raised by `Gateway.find_one_or_fail` when nothing matches."""

    def __init__(self, model: type[Base], criteria: Mapping[str, Any]) -> None:
        self.model = model
        self.criteria = dict(criteria)
        super().__init__(f"{model.__name__} matching {self.criteria!r} does not exist")


class Gateway:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_all(self, model: type[ModelT], columns: Iterable[str]) -> list[dict[str, Any]]:
        # Projection only; no ORDER BY, rows come back in store order.
        names = list(columns)
        stmt = select(*(getattr(model, name) for name in names))
        rows = (await self._session.execute(stmt)).all()
        return [dict(zip(names, row, strict=True)) for row in rows]

    async def find_one(self, model: type[ModelT], **criteria: Any) -> ModelT | None:
        stmt = select(model).filter_by(**criteria).limit(1)
        return (await self._session.execute(stmt)).scalars().first()

    async def find_one_or_fail(self, model: type[ModelT], **criteria: Any) -> ModelT:
        found = await self.find_one(model, **criteria)
        if found is None:
            raise EntityNotFoundError(model, criteria)
        return found

    async def save(self, model: type[ModelT], values: Mapping[str, Any]) -> ModelT:
        """
        Upsert by primary key.

        A key that already exists updates the given fields in place and leaves
        the others untouched; otherwise a new row is inserted and any generated
        key is assigned on the returned object.
        """

        pk_name = inspect(model).primary_key[0].key
        entity = None
        if values.get(pk_name) is not None:
            entity = await self._session.get(model, values[pk_name])

        if entity is None:
            entity = model(**values)
            self._session.add(entity)
        else:
            for key, value in values.items():
                setattr(entity, key, value)

        try:
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            raise
        return entity


# --- Module Notes -----------------------------------------------------------
# Store errors are never translated here; the API layer decides how they surface.

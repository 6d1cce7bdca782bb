"""
detective_api.db.repositories.assignments

Repository for the detective/case join table.

Responsibilities:
- Insert and remove assignment rows directly, without loading either side.
- List the detectives assigned to a case.
"""

from __future__ import annotations

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from detective_api.db.models import case_detectives


class AssignmentRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def assign(self, *, case_id: int, detective_id: str) -> None:
        await self._session.execute(
            insert(case_detectives).values(case_id=case_id, detective_id=detective_id)
        )
        await self._session.commit()

    async def unassign(self, *, case_id: int, detective_id: str) -> bool:
        result = await self._session.execute(
            delete(case_detectives).where(
                case_detectives.c.case_id == case_id,
                case_detectives.c.detective_id == detective_id,
            )
        )
        await self._session.commit()
        return result.rowcount > 0

    async def detective_ids_for_case(self, case_id: int) -> list[str]:
        stmt = (
            select(case_detectives.c.detective_id)
            .where(case_detectives.c.case_id == case_id)
            .order_by(case_detectives.c.detective_id)
        )
        return list((await self._session.execute(stmt)).scalars().all())


# --- Module Notes -----------------------------------------------------------
# Assigning the same pair twice violates the composite primary key and raises IntegrityError.

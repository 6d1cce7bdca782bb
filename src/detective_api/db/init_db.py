"""
detective_api.db.init_db

DB initialization helpers (schema sync and seeding).

Responsibilities:
- Create missing tables when schema sync is enabled.
- Seed the bootstrap detective that new cases are assigned to.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from detective_api.db.base import Base
from detective_api.db.gateway import Gateway
from detective_api.db.models import Detective
from detective_api.observability.logging import get_logger

log = get_logger(__name__)


async def init_db(engine: AsyncEngine) -> None:
    """
    Create tables if they don't exist.
    Databases managed through Alembic keep `db_synchronize` off.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed_detective(
    session_factory: async_sessionmaker[AsyncSession],
    *,
    detective_id: str,
    name: str,
) -> Detective:
    # Existing rows are left alone so a renamed detective keeps its name across restarts.
    async with session_factory() as session:
        gateway = Gateway(session)
        existing = await gateway.find_one(Detective, id=detective_id)
        if existing is not None:
            return existing
        detective = await gateway.save(Detective, {"id": detective_id, "name": name})
        log.info("detective_seeded", detective_id=detective_id)
        return detective


# --- Module Notes -----------------------------------------------------------
# There is no detective-creation endpoint; production detectives are seeded out of band.

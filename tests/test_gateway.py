"""
tests.test_gateway

Persistence layer against a real SQLite store: the generic gateway, the
join-table repository and bootstrap seeding.
"""

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from detective_api.db.gateway import EntityNotFoundError, Gateway
from detective_api.db.init_db import seed_detective
from detective_api.db.models import Case, Detective, Evidence
from detective_api.db.repositories.assignments import AssignmentRepo


@pytest.mark.asyncio
async def test_save_inserts_with_generated_key(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    async with session_factory() as session:
        gateway = Gateway(session)
        first = await gateway.save(Case, {"description": "A", "status": "open"})
        second = await gateway.save(Case, {"description": "B", "status": "open"})

    assert isinstance(first.id, int)
    assert second.id != first.id


@pytest.mark.asyncio
async def test_save_keeps_caller_supplied_key(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    async with session_factory() as session:
        await Gateway(session).save(Detective, {"id": "poirot", "name": "Hercule Poirot"})

    async with session_factory() as session:
        found = await Gateway(session).find_one(Detective, id="poirot")
    assert found is not None
    assert found.name == "Hercule Poirot"


@pytest.mark.asyncio
async def test_save_with_existing_key_updates_only_given_fields(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    async with session_factory() as session:
        case = await Gateway(session).save(Case, {"description": "Before", "status": "open"})

    async with session_factory() as session:
        await Gateway(session).save(Case, {"id": case.id, "status": "closed"})

    async with session_factory() as session:
        found = await Gateway(session).find_one(Case, id=case.id)
    assert found is not None
    assert (found.description, found.status) == ("Before", "closed")


@pytest.mark.asyncio
async def test_find_one_returns_none_when_absent(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    async with session_factory() as session:
        assert await Gateway(session).find_one(Evidence, id=123) is None


@pytest.mark.asyncio
async def test_find_one_or_fail_raises(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    async with session_factory() as session:
        with pytest.raises(EntityNotFoundError) as excinfo:
            await Gateway(session).find_one_or_fail(Detective, id="first")

    assert excinfo.value.model is Detective
    assert excinfo.value.criteria == {"id": "first"}


@pytest.mark.asyncio
async def test_find_all_projects_requested_columns(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    async with session_factory() as session:
        gateway = Gateway(session)
        case = await gateway.save(Case, {"description": "Heist", "status": "open"})
        await gateway.save(Evidence, {"description": "Crowbar", "type": "normal", "case": case})

        rows = await gateway.find_all(Evidence, ["id", "type"])

    assert len(rows) == 1
    assert set(rows[0]) == {"id", "type"}
    assert rows[0]["type"] == "normal"


@pytest.mark.asyncio
async def test_saved_evidence_links_to_case(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    async with session_factory() as session:
        gateway = Gateway(session)
        case = await gateway.save(Case, {"description": "Heist", "status": "open"})
        evidence = await gateway.save(
            Evidence, {"description": "Glove", "type": "normal", "case": case}
        )

    assert evidence.case_id == case.id
    assert evidence.case is case


@pytest.mark.asyncio
async def test_join_table_insert_and_remove(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    async with session_factory() as session:
        gateway = Gateway(session)
        await gateway.save(Detective, {"id": "marple", "name": "Jane Marple"})
        await gateway.save(Detective, {"id": "poirot", "name": "Hercule Poirot"})
        case = await gateway.save(Case, {"description": "Vicarage", "status": "open"})

        repo = AssignmentRepo(session)
        await repo.assign(case_id=case.id, detective_id="poirot")
        await repo.assign(case_id=case.id, detective_id="marple")
        assert await repo.detective_ids_for_case(case.id) == ["marple", "poirot"]

        assert await repo.unassign(case_id=case.id, detective_id="poirot") is True
        assert await repo.detective_ids_for_case(case.id) == ["marple"]

        assert await repo.unassign(case_id=case.id, detective_id="poirot") is False


@pytest.mark.asyncio
async def test_join_table_rejects_duplicate_assignment(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    async with session_factory() as session:
        gateway = Gateway(session)
        await gateway.save(Detective, {"id": "marple", "name": "Jane Marple"})
        case = await gateway.save(Case, {"description": "Library", "status": "open"})

        repo = AssignmentRepo(session)
        await repo.assign(case_id=case.id, detective_id="marple")
        with pytest.raises(IntegrityError):
            await repo.assign(case_id=case.id, detective_id="marple")


@pytest.mark.asyncio
async def test_case_saved_with_detectives_fills_join_table(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    async with session_factory() as session:
        gateway = Gateway(session)
        detective = await gateway.save(Detective, {"id": "first", "name": "First"})
        case = await gateway.save(
            Case, {"description": "Linked", "status": "open", "detectives": [detective]}
        )
        assert await AssignmentRepo(session).detective_ids_for_case(case.id) == ["first"]


@pytest.mark.asyncio
async def test_seed_detective_is_idempotent(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    await seed_detective(session_factory, detective_id="first", name="Original")
    await seed_detective(session_factory, detective_id="first", name="Ignored")

    async with session_factory() as session:
        gateway = Gateway(session)
        rows = await gateway.find_all(Detective, ["id", "name"])
    assert rows == [{"id": "first", "name": "Original"}]

"""
tests.conftest

Shared fixtures: a throwaway SQLite store, the app with its lifespan running,
and an in-process HTTP client.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from detective_api.api.app import create_app
from detective_api.db.gateway import Gateway
from detective_api.db.init_db import init_db
from detective_api.db.session import create_engine, create_sessionmaker
from detective_api.settings import Settings


def _make_settings(tmp_path: Path, **overrides: object) -> Settings:
    values: dict[str, object] = {
        "env": "test",
        "database_url": f"sqlite+aiosqlite:///{tmp_path / 'detective.db'}",
        "db_synchronize": True,
        "seed_bootstrap_detective": True,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture()
def make_settings(tmp_path: Path) -> Callable[..., Settings]:
    def factory(**overrides: object) -> Settings:
        return _make_settings(tmp_path, **overrides)

    return factory


@pytest.fixture()
def settings(make_settings: Callable[..., Settings]) -> Settings:
    return make_settings()


@pytest_asyncio.fixture()
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    app = create_app(settings=settings)
    # httpx ASGITransport does not run the lifespan; enter it explicitly.
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture()
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture()
async def gateway(app: FastAPI) -> AsyncIterator[Gateway]:
    # Separate session from the ones the requests use; handy for seeding rows.
    async with app.state.sessionmaker() as session:
        yield Gateway(session)


@pytest_asyncio.fixture()
async def session_factory(settings: Settings) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = create_engine(settings)
    await init_db(engine)
    try:
        yield create_sessionmaker(engine)
    finally:
        await engine.dispose()

"""
detective_api.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, DB sessions and the persistence gateway.
- Encapsulate app.state access patterns (engine/sessionmaker/settings).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from detective_api.db.gateway import Gateway
from detective_api.settings import Settings

# Largest signed 64-bit integer; bigger values cannot be bound as a key parameter.
_MAX_ROW_ID = 2**63 - 1
_RADIX_PREFIXES = ("0x", "0o", "0b")


def settings_dep(request: Request) -> Settings:
    # The app is built around one Settings instance (see `api.app.create_app`).
    return request.app.state.settings


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    return request.app.state.sessionmaker


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


def gateway_dep(session: AsyncSession = Depends(db_session)) -> Gateway:
    return Gateway(session)


def parse_numeric_id(raw: str) -> int | None:
    """
    Read a path id the way a numeric key lookup would.

    Decimal and exponent forms ("7", "1.0", "1e2") and unsigned 0x/0o/0b
    literals are accepted. Anything that is not an integral number (e.g. "abc",
    "1.5", "1_0") returns None, which callers treat as "no such row" rather than
    a bad request.
    """

    text = raw.strip()
    # Digit separators and non-ASCII digits are not numeric literals here.
    if "_" in text or not text.isascii():
        return None
    if text[:2].lower() in _RADIX_PREFIXES:
        try:
            value = int(text, 0)
        except ValueError:
            return None
        return value if value <= _MAX_ROW_ID else None

    try:
        value = float(text)
    except ValueError:
        return None
    if not value.is_integer() or abs(value) > _MAX_ROW_ID:
        return None
    return int(value)

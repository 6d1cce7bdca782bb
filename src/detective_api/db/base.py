"""
detective_api.db.base

Shared declarative base for the detective case models.
"""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Metadata root for every table, including the detective/case join table."""


# --- Module Notes -----------------------------------------------------------
# Import `detective_api.db.models` before reading `Base.metadata`; the tables
# register themselves on import.

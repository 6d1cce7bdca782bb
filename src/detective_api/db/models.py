"""
detective_api.db.models

Persistence schema for the detective case records.

Responsibilities:
- Declare the three entities and their relationships:
  - Detective: caller-keyed investigator record
  - Case: investigation, assigned to detectives, owning evidence
  - Evidence: item attached to one case
- Declare the detective/case join table explicitly.
"""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from detective_api.db.base import Base

# Table and column names match the schema of the deployed MySQL database.
case_detectives = Table(
    "cases_detectives_detectives",
    Base.metadata,
    Column("case_id", Integer, ForeignKey("cases.id"), primary_key=True, index=True),
    Column("detective_id", String(255), ForeignKey("detectives.id"), primary_key=True, index=True),
)


class Detective(Base):
    __tablename__ = "detectives"

    # Caller-supplied; never generated.
    id: Mapped[str] = mapped_column(String(255), primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    cases: Mapped[list[Case]] = relationship(
        secondary=case_detectives, back_populates="detectives"
    )


class Case(Base):
    __tablename__ = "cases"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    # Free-form; "open" and "closed" in practice.
    status: Mapped[str] = mapped_column(String(255), nullable=False)

    detectives: Mapped[list[Detective]] = relationship(
        secondary=case_detectives, back_populates="cases"
    )
    evidences: Mapped[list[Evidence]] = relationship(back_populates="case")


class Evidence(Base):
    __tablename__ = "evidences"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(255), nullable=False)
    case_id: Mapped[int | None] = mapped_column(
        "caseId", Integer, ForeignKey("cases.id"), nullable=True
    )

    case: Mapped[Case | None] = relationship(back_populates="evidences")


# --- Module Notes -----------------------------------------------------------
# No cascade rules: nothing is deleted through the API, so orphan handling never applies.

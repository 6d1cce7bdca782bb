"""
detective_api.api.schemas

Request and response models for the resource routers.

Request bodies carry optional fields: the API does not require them, and a
field left out of a body is not written (see `Gateway.save`).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class _ORMModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# Detectives


class DetectiveName(_ORMModel):
    name: str


class DetectiveOut(_ORMModel):
    id: str
    name: str


class DetectiveUpdate(BaseModel):
    name: str | None = None


# Cases


class CaseOut(_ORMModel):
    id: int
    description: str
    status: str


class CaseCreated(CaseOut):
    detectives: list[DetectiveOut]


class CaseCreate(BaseModel):
    description: str | None = None


class CaseUpdate(BaseModel):
    description: str | None = None
    status: str | None = None


# Evidences


class EvidenceOut(_ORMModel):
    id: int
    description: str
    type: str


class EvidenceCreated(EvidenceOut):
    case: CaseOut


class EvidenceCreate(BaseModel):
    description: str | None = None


class EvidenceUpdate(BaseModel):
    description: str | None = None

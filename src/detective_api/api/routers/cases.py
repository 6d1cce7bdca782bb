"""
detective_api.api.routers.cases

Case endpoints, including evidence intake for a case.

Responsibilities:
- List, fetch, open and update cases.
- Attach new evidence to an existing case.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from detective_api.api.deps import gateway_dep, parse_numeric_id, settings_dep
from detective_api.api.errors import ResourceNotFound
from detective_api.api.schemas import (
    CaseCreate,
    CaseCreated,
    CaseOut,
    CaseUpdate,
    EvidenceCreate,
    EvidenceCreated,
)
from detective_api.db.gateway import Gateway
from detective_api.db.models import Case, Detective, Evidence
from detective_api.observability.logging import get_logger
from detective_api.settings import Settings

router = APIRouter(prefix="/cases", tags=["cases"])
log = get_logger(__name__)

NOT_FOUND = "Case not found"

OPEN_STATUS = "open"
DEFAULT_EVIDENCE_TYPE = "normal"


async def _load_case(gateway: Gateway, raw_id: str) -> Case:
    case_id = parse_numeric_id(raw_id)
    case = await gateway.find_one(Case, id=case_id) if case_id is not None else None
    if case is None:
        raise ResourceNotFound(NOT_FOUND)
    return case


@router.get("", response_model=list[CaseOut], summary="Gets all cases")
async def list_cases(gateway: Gateway = Depends(gateway_dep)) -> list[dict[str, Any]]:
    return await gateway.find_all(Case, ["id", "description", "status"])


@router.get(
    "/{case_id}",
    response_model=CaseOut,
    summary="Gets the details of one case",
    responses={404: {"description": NOT_FOUND}},
)
async def get_case(case_id: str, gateway: Gateway = Depends(gateway_dep)) -> Case:
    return await _load_case(gateway, case_id)


@router.post("", response_model=CaseCreated, summary="Creates a new case")
async def create_case(
    body: CaseCreate | None = None,
    gateway: Gateway = Depends(gateway_dep),
    settings: Settings = Depends(settings_dep),
) -> Case:
    # Missing bootstrap detective is a hard failure, not a 404.
    detective = await gateway.find_one_or_fail(Detective, id=settings.bootstrap_detective_id)

    fields = body.model_dump(exclude_unset=True) if body is not None else {}
    case = await gateway.save(
        Case,
        {**fields, "status": OPEN_STATUS, "detectives": [detective]},
    )
    log.info("case_created", case_id=case.id, detective_id=detective.id)
    return case


@router.put(
    "/{case_id}",
    response_model=CaseOut,
    summary="Updates a case",
    responses={404: {"description": NOT_FOUND}},
)
async def update_case(
    case_id: str,
    body: CaseUpdate | None = None,
    gateway: Gateway = Depends(gateway_dep),
) -> Case:
    case = await _load_case(gateway, case_id)

    changes = body.model_dump(exclude_unset=True) if body is not None else {}
    updated = await gateway.save(Case, {"id": case.id, **changes})
    log.info("case_updated", case_id=updated.id, fields=sorted(changes))
    return updated


@router.post(
    "/{case_id}/evidences",
    response_model=EvidenceCreated,
    summary="Creates a new evidence file",
    responses={404: {"description": NOT_FOUND}},
)
async def create_evidence(
    case_id: str,
    body: EvidenceCreate | None = None,
    gateway: Gateway = Depends(gateway_dep),
) -> Evidence:
    case = await _load_case(gateway, case_id)

    fields = body.model_dump(exclude_unset=True) if body is not None else {}
    evidence = await gateway.save(
        Evidence,
        {**fields, "type": DEFAULT_EVIDENCE_TYPE, "case": case},
    )
    log.info("evidence_created", evidence_id=evidence.id, case_id=case.id)
    return evidence

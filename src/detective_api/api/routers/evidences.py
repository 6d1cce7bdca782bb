"""
detective_api.api.routers.evidences

Evidence endpoints. New evidence is filed through `POST /cases/{id}/evidences`.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from detective_api.api.deps import gateway_dep, parse_numeric_id
from detective_api.api.errors import ResourceNotFound
from detective_api.api.schemas import EvidenceOut, EvidenceUpdate
from detective_api.db.gateway import Gateway
from detective_api.db.models import Evidence
from detective_api.observability.logging import get_logger

router = APIRouter(prefix="/evidences", tags=["evidences"])
log = get_logger(__name__)

NOT_FOUND = "Evidence not found"


async def _load_evidence(gateway: Gateway, raw_id: str) -> Evidence:
    evidence_id = parse_numeric_id(raw_id)
    evidence = (
        await gateway.find_one(Evidence, id=evidence_id) if evidence_id is not None else None
    )
    if evidence is None:
        raise ResourceNotFound(NOT_FOUND)
    return evidence


@router.get("", response_model=list[EvidenceOut], summary="Gets all evidences")
async def list_evidences(gateway: Gateway = Depends(gateway_dep)) -> list[dict[str, Any]]:
    return await gateway.find_all(Evidence, ["id", "description", "type"])


@router.get(
    "/{evidence_id}",
    response_model=EvidenceOut,
    summary="Gets the details of one evidence file",
    responses={404: {"description": NOT_FOUND}},
)
async def get_evidence(evidence_id: str, gateway: Gateway = Depends(gateway_dep)) -> Evidence:
    return await _load_evidence(gateway, evidence_id)


@router.put(
    "/{evidence_id}",
    response_model=EvidenceOut,
    summary="Updates an evidence file",
    responses={404: {"description": NOT_FOUND}},
)
async def update_evidence(
    evidence_id: str,
    body: EvidenceUpdate | None = None,
    gateway: Gateway = Depends(gateway_dep),
) -> Evidence:
    evidence = await _load_evidence(gateway, evidence_id)

    # Only the description is editable; the evidence type is fixed at intake.
    changes = body.model_dump(exclude_unset=True) if body is not None else {}
    updated = await gateway.save(Evidence, {"id": evidence.id, **changes})
    log.info("evidence_updated", evidence_id=updated.id, fields=sorted(changes))
    return updated

"""
detective_api.api.routers.detectives

Detective endpoints.

Responsibilities:
- List detectives (names only) and fetch one by its caller-chosen id.
- Rename an existing detective.

Detectives are never created here; they are seeded out of band.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from detective_api.api.deps import gateway_dep
from detective_api.api.errors import ResourceNotFound
from detective_api.api.schemas import DetectiveName, DetectiveOut, DetectiveUpdate
from detective_api.db.gateway import Gateway
from detective_api.db.models import Detective
from detective_api.observability.logging import get_logger

router = APIRouter(prefix="/detectives", tags=["detectives"])
log = get_logger(__name__)

NOT_FOUND = "Detective not found"


@router.get("", response_model=list[DetectiveName], summary="Gets all detectives")
async def list_detectives(gateway: Gateway = Depends(gateway_dep)) -> list[dict[str, str]]:
    return await gateway.find_all(Detective, ["name"])


@router.get(
    "/{detective_id}",
    response_model=DetectiveOut,
    summary="Gets the details of one detective",
    responses={404: {"description": NOT_FOUND}},
)
async def get_detective(detective_id: str, gateway: Gateway = Depends(gateway_dep)) -> Detective:
    detective = await gateway.find_one(Detective, id=detective_id)
    if detective is None:
        raise ResourceNotFound(NOT_FOUND)
    return detective


@router.put(
    "/{detective_id}",
    response_model=DetectiveOut,
    summary="Updates the details of one detective",
    responses={404: {"description": NOT_FOUND}},
)
async def update_detective(
    detective_id: str,
    body: DetectiveUpdate | None = None,
    gateway: Gateway = Depends(gateway_dep),
) -> Detective:
    detective = await gateway.find_one(Detective, id=detective_id)
    if detective is None:
        raise ResourceNotFound(NOT_FOUND)

    changes = body.model_dump(exclude_unset=True) if body is not None else {}
    updated = await gateway.save(Detective, {"id": detective.id, **changes})
    log.info("detective_updated", detective_id=updated.id, fields=sorted(changes))
    return updated

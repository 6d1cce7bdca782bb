"""
detective_api.api.errors

Error taxonomy and exception handlers for the HTTP layer.

Responsibilities:
- Render not-found as a 404 with a fixed plain-text body.
- Render a failed hard dependency (e.g. missing bootstrap detective) as a 500 JSON envelope.
- Log and normalize any other unhandled error into the same envelope.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.status import HTTP_404_NOT_FOUND, HTTP_500_INTERNAL_SERVER_ERROR

from detective_api.db.gateway import EntityNotFoundError
from detective_api.observability.logging import get_logger

log = get_logger(__name__)


class ResourceNotFound(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def error_envelope(code: str, message: str) -> dict[str, Any]:
    return {"error": {"code": code, "message": message}}


async def resource_not_found_handler(_: Request, exc: ResourceNotFound) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=HTTP_404_NOT_FOUND)


async def dependency_failure_handler(_: Request, exc: EntityNotFoundError) -> JSONResponse:
    log.error("dependency_missing", model=exc.model.__name__, criteria=exc.criteria)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_envelope("dependency_failure", str(exc)),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    log.exception("unhandled_error", error_type=type(exc).__name__, request_id=request_id)
    response = JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_envelope("internal_error", "Internal server error"),
    )
    # Runs after the request-context middleware has unwound, so the header is set here.
    if request_id is not None:
        response.headers["x-request-id"] = request_id
    return response


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ResourceNotFound, resource_not_found_handler)
    app.add_exception_handler(EntityNotFoundError, dependency_failure_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


# --- Module Notes -----------------------------------------------------------
# Starlette re-raises errors caught by the `Exception` handler after the response is sent,
# so servers still log them; the client only ever sees the envelope.

"""
Traduzione degli errori di dominio in risposte HTTP.

NotFound -> 404, ValidationFailed -> 422 con mappa completa per campo,
assegnazione attiva duplicata -> 409, errore di persistenza -> 500.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from roster.core.exceptions import (
    DuplicateActiveAssignmentError,
    NotFoundError,
    PersistenceError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)


def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={
            "error": str(exc),
            "entity_type": exc.entity_type,
            "entity_id": exc.entity_id,
        },
    )


def _validation_failed(request: Request, exc: ValidationFailedError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"error": str(exc), "errors": exc.errors},
    )


def _duplicate(request: Request, exc: DuplicateActiveAssignmentError) -> JSONResponse:
    return JSONResponse(
        status_code=409,
        content={
            "error": str(exc),
            "player_id": exc.player_id,
            "team_name": exc.team_name,
            "championship_name": exc.championship_name,
        },
    )


def _persistence(request: Request, exc: PersistenceError) -> JSONResponse:
    logger.error(
        "Errore DB %s %s: operation=%s entity=%s id=%s",
        request.method, request.url.path, exc.operation, exc.entity_type, exc.entity_id,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "Errore database",
            "operation": exc.operation,
            "entity_type": exc.entity_type,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, _not_found)
    app.add_exception_handler(ValidationFailedError, _validation_failed)
    app.add_exception_handler(DuplicateActiveAssignmentError, _duplicate)
    app.add_exception_handler(PersistenceError, _persistence)

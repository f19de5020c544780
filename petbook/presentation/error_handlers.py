"""Exception handlers that turn domain exceptions into ``{"error": ...}`` bodies.

Status mapping:
    ValidationError       -> 400
    DuplicateEntityError  -> 409
    EntityNotFoundError   -> 404
    StorageError          -> 500

Usage:
    from petbook.presentation.error_handlers import register_exception_handlers

    app = FastAPI()
    register_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from petbook.application.schemas import ErrorResponse
from petbook.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors or exc.message)
    return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def duplicate_entity_handler(request: Request, exc: DuplicateEntityError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return _error_response(status.HTTP_409_CONFLICT, str(exc))


async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return _error_response(status.HTTP_404_NOT_FOUND, str(exc))


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc.detail)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Register the domain exception handlers on the application."""
    app.add_exception_handler(ValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DuplicateEntityError, duplicate_entity_handler)  # type: ignore[arg-type]
    app.add_exception_handler(EntityNotFoundError, not_found_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StorageError, storage_error_handler)  # type: ignore[arg-type]

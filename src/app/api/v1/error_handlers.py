# app/api/v1/error_handlers.py
"""
FastAPI exception handlers that map service/repository exceptions to HTTP responses.

- Services and repositories raise app.exceptions.base.* exceptions (DuplicateError, NotFoundError, ...)
- These handlers produce stable JSON payloads (via .to_payload()) and status codes (via .http_status()),
  so every resource shares one status table.
- Request validation errors are split in two: a malformed id (path or `?id=`) is a 400 `invalid_id`,
  anything wrong with the body is a 422 `validation_failed`.
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.exceptions.base import (
    DuplicateError,
    NotFoundError,
    ReferencedEntityNotFoundError,
    RepositoryError,
    StorageError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)


# Most specific first. Mapping lives in the exception classes; handlers only log and render.

async def duplicate_error_handler(request: Request, exc: DuplicateError) -> JSONResponse:
    """
    409 Conflict for duplicates.
    Payload: exc.to_payload() -> {"detail": "...", "code": "duplicate", "fields": [...]}
    """
    logger.info("DuplicateError for %s %s: fields=%s", request.method, request.url.path, exc.fields)
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def reference_not_found_handler(request: Request, exc: ReferencedEntityNotFoundError) -> JSONResponse:
    """
    409 Conflict when a referenced record (warehouse, locality, ...) does not exist.
    """
    logger.info(
        "ReferencedEntityNotFoundError for %s %s: fields=%s reference=%s",
        request.method, request.url.path, exc.fields, exc.reference,
    )
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """
    404 Not Found.
    """
    logger.info("NotFoundError for %s %s", request.method, request.url.path)
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    """
    500 for storage failures. The cause was already logged with its traceback
    where it was wrapped; the client only sees the generic message.
    """
    logger.error("StorageError for %s %s: %s", request.method, request.url.path, str(exc))
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    """
    Fallback for the remaining repository errors (identity_immutable, invalid_field, in_use, ...).
    """
    logger.warning("RepositoryError for %s %s: %s", request.method, request.url.path, str(exc))
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


def _is_id_error(loc: tuple) -> bool:
    if not loc:
        return False
    if loc[0] == "path":
        return True
    return loc[0] == "query" and loc[-1] == "id"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    400 `invalid_id` for a malformed identity, 422 `validation_failed` for body errors.
    """
    errors = exc.errors()

    if any(_is_id_error(tuple(err.get("loc", ()))) for err in errors):
        logger.info("Invalid id for %s %s", request.method, request.url.path)
        error = RepositoryError("invalid id", error_code="invalid_id")
        return JSONResponse(status_code=error.http_status(), content=error.to_payload())

    fields = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        if loc and loc[0] not in fields:
            fields.append(loc[0])

    message = errors[0].get("msg", "invalid request") if errors else "invalid request"
    logger.info("Validation failed for %s %s: fields=%s", request.method, request.url.path, fields)
    error = ValidationFailedError(message, fields=fields)
    return JSONResponse(status_code=error.http_status(), content=error.to_payload())


# Helper to register all handlers on an app (called from the app factory)
def register_exception_handlers(app):
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(DuplicateError, duplicate_error_handler)
    app.add_exception_handler(ReferencedEntityNotFoundError, reference_not_found_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(RepositoryError, repository_error_handler)

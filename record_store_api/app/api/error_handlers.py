"""
Global exception handlers.

- ``RecordNotFoundError`` becomes ``404`` with ``{"id": N, "err": "record not found"}``
- ``RequestValidationError`` on a path parameter (non-integer or out of
  range id) becomes ``404``, the URL names no record
- any other ``RequestValidationError`` (bad JSON, missing fields, wrong
  types) becomes ``400`` with per-field details
- anything else becomes ``500`` without leaking internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from record_store_api.app.core.errors import RecordNotFoundError
from record_store_api.app.schemas.record import RecordNotFound

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_not_found_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_not_found_handler(app: FastAPI) -> None:
    @app.exception_handler(RecordNotFoundError)
    async def record_not_found_handler(request: Request, exc: RecordNotFoundError):
        body = RecordNotFound(id=exc.record_id, err=exc.message)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=body.model_dump(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s %s: %s", request.method, request.url.path, exc.errors())
        code = status.HTTP_400_BAD_REQUEST
        if any(e["loc"] and e["loc"][0] == "path" for e in exc.errors()):
            code = status.HTTP_404_NOT_FOUND
        return JSONResponse(
            status_code=code,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"err": "internal error"},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "err": "invalid request",
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }

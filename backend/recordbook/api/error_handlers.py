"""Error Handlers: map engine and request failures to the JSON error envelope.

Invariants:
    - RecordbookError -> its own http_status and to_response() envelope
    - Log level follows the error's severity: local rejections (offline toggle,
      validation) log as warnings, classified store failures as errors, a
      missing schema as critical
    - RequestValidationError (bad path kind, non-object body) -> 400 VALIDATION_ERROR
    - Anything else -> opaque 500, details only in the log

Design Decisions:
    - The engine has already stored the message in lastError before raising;
      handlers only shape the HTTP answer and never touch engine state
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from recordbook.core.errors import RecordbookError, ErrorSeverity

logger = logging.getLogger(__name__)

_LOG_LEVELS: dict[ErrorSeverity, int] = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain, request-validation and catch-all handlers."""
    app.add_exception_handler(RecordbookError, recordbook_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def recordbook_error_handler(request: Request, exc: RecordbookError):
    ctx = exc.context
    logger.log(
        _LOG_LEVELS.get(exc.severity, logging.ERROR),
        f"{request.method} {request.url.path} failed: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "entity_kind": ctx.entity_kind,
            "entity_id": ctx.entity_id,
            "operation": ctx.operation,
            "backend_code": ctx.backend_code,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def request_validation_handler(
    request: Request, exc: RequestValidationError,
):
    logger.warning(
        f"Rejected request on {request.url.path}: {exc.errors()}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request data",
                "category": "validation",
                "severity": ErrorSeverity.WARNING.value,
                "details": [
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                    }
                    for e in exc.errors()
                ],
            },
        },
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": "internal",
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )

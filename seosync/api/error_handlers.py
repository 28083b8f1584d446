"""Error Handlers — map failures raised out of routes onto JSON envelopes.

Invariants:
    - SeoSyncError → its own http_status and to_response() envelope, logged at
      the level its severity names with page_id/component/causes as extras
    - RequestValidationError → 400 VALIDATION_ERROR with one detail per field
    - Exception (catch-all) → 500 INTERNAL_ERROR; the message never carries
      the exception text

Design Decisions:
    - Severity drives the log level: a missing share container (409) or an
      undelivered analytics event (502) is a WARNING in the logs, a failed
      generator an ERROR
    - Routes raise Err payloads unchanged, so the context a component attached
      (page id, component name, wrapped causes) reaches the log line here
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from seosync.core.errors import ErrorSeverity, SeoSyncError

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def log_level_for(error: SeoSyncError) -> int:
    return _LOG_LEVELS.get(error.severity, logging.ERROR)


def _describe_cause(cause: Exception) -> str:
    if isinstance(cause, SeoSyncError):
        return f"{cause.code}: {cause.message}"
    return f"{type(cause).__name__}: {cause}"


def error_log_extra(error: SeoSyncError, path: str) -> dict:
    """Structured fields for the JSON log line of a handled engine error."""
    extra = {
        "error_code": error.code,
        "severity": error.severity.value,
        "path": path,
        "page_id": error.context.page_id,
        "component": error.context.component,
        "url": error.context.url,
    }
    causes = getattr(error, "causes", None)
    if causes:
        extra["causes"] = [_describe_cause(c) for c in causes]
    return extra


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SeoSyncError, seosync_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def seosync_error_handler(request: Request, exc: SeoSyncError):
    logger.log(
        log_level_for(exc),
        f"{exc.category.value} failure on {request.url.path}: {exc.message}",
        extra=error_log_extra(exc, request.url.path),
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Rejected request body on {request.url.path}: "
        f"{', '.join(d['field'] for d in details)}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request data",
                "category": "validation",
                "severity": ErrorSeverity.ERROR.value,
                "details": details,
            },
        },
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    """Catch-all: logs the traceback, answers a fixed envelope."""
    logger.critical(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
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

"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Every error leaves the API
as JSON shaped {"error": CODE, "message": ..., "details"?: ...}.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import DirectoryException
from app.shared.telemetry.tracing import get_trace_id

logger = logging.getLogger(__name__)

# HTTP status per DirectoryException.error_code; anything else is a 400
_STATUS_BY_ERROR_CODE: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "PROVIDER_ERROR": 502,
}


def _directory_exception_handler(
    request: Request, exc: DirectoryException
) -> JSONResponse:
    """Return JSON from DirectoryException.to_dict() with the mapped status code."""
    status = _STATUS_BY_ERROR_CODE.get(exc.error_code, 400)
    if status >= 500:
        logger.error(
            "%s %s failed (trace_id=%s): %s",
            request.method,
            request.url.path,
            get_trace_id(),
            exc.message,
        )
    return JSONResponse(status_code=status, content=exc.to_dict())


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Return validation errors without non-serializable context (e.g. exceptions in ctx)."""
    return [
        {k: v for k, v in error.items() if k in ("type", "loc", "msg", "input")}
        for error in exc.errors()
    ]


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with per-parameter validation details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": jsonable_errors(exc),
        },
    )


def _rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Return 429 when a client exceeds PEOPLE_RATE_LIMIT."""
    logger.warning("Rate limit exceeded for %s: %s", request.url.path, exc.detail)
    return JSONResponse(
        status_code=429,
        content={"error": "RATE_LIMITED", "message": f"Rate limit exceeded: {exc.detail}"},
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception (trace_id=%s): %s", get_trace_id(), exc)
    detail: Any = str(exc) if get_settings().debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handler lookup walks the exception's
    MRO, so RateLimitExceeded keeps its own body even though it subclasses
    Starlette's HTTPException.
    """
    app.add_exception_handler(DirectoryException, _directory_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)

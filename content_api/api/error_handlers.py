"""Error Handlers — global exception handlers for the Content API.

Invariants:
    - Every error response body is {"message": str}
    - ContentApiError → its own status; 5xx variants are logged with traceback
      and answered with "internal error"
    - ContentStoreError(NOT_FOUND) → 404 "not found"; other kinds → 500
    - RequestValidationError → 400 "invalid request body"
    - Starlette HTTPException (unknown route, wrong method) keeps its status
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Layered handlers: domain, validation, framework, catch-all
    - Extracted from main.py so the app module stays wiring-only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from content_api.core.errors import (
    INTERNAL_ERROR_MESSAGE, ContentApiError, ContentStoreError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_content_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _log_extra(request: Request, exc: ContentApiError) -> dict:
    extra = {
        "error_code": exc.code,
        "path": request.url.path,
        "method": request.method,
    }
    if isinstance(exc, ContentStoreError):
        extra["error_kind"] = exc.kind.value
        extra["content_id"] = exc.content_id
    return extra


def _register_content_error_handler(app: FastAPI) -> None:
    """Register domain and store error handler."""

    @app.exception_handler(ContentApiError)
    async def content_error_handler(request: Request, exc: ContentApiError):
        if exc.is_server_error:
            logger.error(
                f"ContentApiError: {exc.message}",
                extra=_log_extra(request, exc),
                exc_info=exc,
            )
        else:
            logger.info(
                f"Request rejected: {exc.message}",
                extra=_log_extra(request, exc),
            )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "invalid request body"},
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register framework HTTP error handler (404 route, 405 method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": message.lower()},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": INTERNAL_ERROR_MESSAGE},
        )

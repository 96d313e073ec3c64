"""Error Handlers — global exception handlers for the UserHub API.

Invariants:
    - Every handler renders a UserHubError envelope: one shape for all non-2xx responses
    - Framework HTTPException (404, 405, ...) → same envelope, same status code
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details
    - Log level follows the error's severity

Design Decisions:
    - Four handler layers: domain, HTTP, validation, catch-all
    - 405 responses keep the Allow header the router computed
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from userhub.core.errors import (
    ErrorContext, ErrorSeverity, HTTPStatusError, InternalError,
    MethodNotAllowedError, RequestValidationFailedError, RouteNotFoundError,
    UserHubError,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_userhub_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_userhub_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(UserHubError)
    async def userhub_error_handler(request: Request, exc: UserHubError):
        """Handle all UserHub domain errors."""
        _log_error(request, exc, f"UserHubError: {exc.message}")
        return _error_response(exc)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for HTTP errors raised by the router or routes."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Render framework HTTP errors in the UserHub envelope."""
        error = _to_userhub_error(request, exc)
        _log_error(
            request, error,
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
        )
        return _error_response(error, headers=getattr(exc, "headers", None))


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        error = RequestValidationFailedError(
            _validation_details(exc), _request_context(request),
        )
        _log_error(
            request, error,
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return _error_response(error)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        error = InternalError(_request_context(request))
        _log_error(
            request, error,
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return _error_response(error)


def _request_context(request: Request) -> ErrorContext:
    return ErrorContext(path=request.url.path, method=request.method)


def _log_error(
    request: Request, error: UserHubError, message: str, exc_info: bool = False,
) -> None:
    logger.log(
        _LOG_LEVELS.get(error.severity, logging.ERROR),
        message,
        exc_info=exc_info,
        extra={
            "error_code": error.code,
            "path": request.url.path,
            "method": request.method,
            "status_code": error.http_status,
        },
    )


def _error_response(
    error: UserHubError, headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=error.http_status,
        content=error.to_response(),
        headers=headers,
    )


def _to_userhub_error(
    request: Request, exc: StarletteHTTPException,
) -> UserHubError:
    """Map a framework HTTPException onto the domain hierarchy."""
    context = _request_context(request)
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return RouteNotFoundError(request.url.path, context)
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return MethodNotAllowedError(request.method, request.url.path, context)
    return HTTPStatusError(exc.status_code, str(exc.detail), context)


def _validation_details(exc: RequestValidationError) -> list[dict]:
    """Flatten Pydantic errors into field/message/type records."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]

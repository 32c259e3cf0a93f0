"""Error Handlers — global exception handlers for the workbench API.

Invariants:
    - TechniquesError → structured JSON envelope; logged with technique + argument
    - Log level follows ErrorSeverity (WARNING for client-side misuse, ERROR above)
    - InputTooLargeError → WARNING naming the configured limit; body echoes the limit
    - RequestValidationError → field-level error details
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Dedicated InputTooLargeError handler: a configured guard tripping is expected
      traffic, not a domain fault, so it is logged apart from other TechniquesErrors
    - Extracted from main.py to keep the app module small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import ErrorSeverity, InputTooLargeError, TechniquesError

logger = logging.getLogger(__name__)

_LOG_LEVELS: dict[ErrorSeverity, int] = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.WARNING,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_input_too_large_handler(app)
    _register_techniques_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _error_extra(request: Request, exc: TechniquesError) -> dict:
    """Structured log fields shared by every domain error."""
    return {
        "error_code": exc.code,
        "path": request.url.path,
        "technique": exc.context.technique,
        "argument": exc.context.argument,
    }


def _register_input_too_large_handler(app: FastAPI) -> None:
    """Register the computation-limit guard handler."""

    @app.exception_handler(InputTooLargeError)
    async def input_too_large_handler(request: Request, exc: InputTooLargeError):
        logger.warning(
            f"{exc.context.technique or 'request'} rejected: "
            f"{exc.context.argument} above limit {exc.limit}",
            extra={**_error_extra(request, exc), "limit": exc.limit},
        )
        body = exc.to_response()
        body["error"]["context"]["limit"] = exc.limit
        return JSONResponse(status_code=exc.http_status, content=body)


def _register_techniques_error_handler(app: FastAPI) -> None:
    """Register domain error handler (InvalidArgumentError, not-found, ...)."""

    @app.exception_handler(TechniquesError)
    async def techniques_error_handler(request: Request, exc: TechniquesError):
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"{exc.code} in {exc.context.technique or request.url.path}: {exc.message}",
            extra=_error_extra(request, exc),
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
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
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
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }

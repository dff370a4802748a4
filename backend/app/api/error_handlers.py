"""Error Handlers — global exception handlers for the Bookstore API.

Invariants:
    - BookstoreError → {"error": {"message", "status"}} with the error's own status
    - RequestValidationError → 400 with one message per schema violation
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (BookstoreError), validation (Pydantic), catch-all (Exception)
    - Message rendering delegated to core/schema_messages.py (pure, unit-tested)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import BookstoreError, BookValidationError, ErrorSeverity
from app.core.schema_messages import collect_violations

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_bookstore_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_bookstore_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(BookstoreError)
    async def bookstore_error_handler(request: Request, exc: BookstoreError):
        """Handle all Bookstore domain/infrastructure errors."""
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
        }
        if exc.severity == ErrorSeverity.CRITICAL:
            logger.error(f"BookstoreError: {exc.message}", extra=extra)
        else:
            logger.warning(f"BookstoreError: {exc.message}", extra=extra)
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
        error = BookValidationError(collect_violations(exc.errors()))
        logger.warning(
            f"Validation error on {request.url.path}: {error.message}",
            extra={"error_code": error.code, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
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
                    "message": "An unexpected error occurred",
                    "status": status.HTTP_500_INTERNAL_SERVER_ERROR,
                },
            },
        )

"""Error Handlers — global exception handlers for the Blogsphere API.

Invariants:
    - BlogsphereError → {"error": message} with the error's own status
    - Client errors logged at WARNING, server errors at ERROR, with log_context() as extras
    - Exception (catch-all) → 500 {"error": "Server error"}, never leaks internal details

Design Decisions:
    - Two-layer handler: domain (BlogsphereError) and catch-all (Exception)
    - Kept out of main.py so the app module only wires things together
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from blogsphere.core.errors import (
    BlogsphereError, ErrorSeverity, SERVER_ERROR_MESSAGE,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_blogsphere_error_handler(app)
    _register_generic_error_handler(app)


def _register_blogsphere_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(BlogsphereError)
    async def blogsphere_error_handler(request: Request, exc: BlogsphereError):
        """Handle all Blogsphere domain/infrastructure errors."""
        level = (
            logging.WARNING if exc.severity == ErrorSeverity.WARNING
            else logging.ERROR
        )
        logger.log(
            level,
            f"BlogsphereError: {exc.message}",
            extra={**exc.log_context(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
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
            content={"error": SERVER_ERROR_MESSAGE},
        )

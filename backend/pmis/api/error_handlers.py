"""Error Handlers — global exception handlers for the PMIS API.

Invariants:
    - PmisError → its own status code and {"error": message}
    - RequestValidationError (malformed JSON, non-integer id) → 400, detail logged only
    - Exception (catch-all) → 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from pmis.core.errors import PmisError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_pmis_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_pmis_error_handler(app: FastAPI) -> None:

    @app.exception_handler(PmisError)
    async def pmis_error_handler(request: Request, exc: PmisError):
        """Handle all PMIS domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"PmisError: {exc.message}",
            extra={**exc.log_extra(), "path": request.url.path},
        )
        if exc.context.debug_info:
            logger.debug(f"Error detail: {exc.context.debug_info}")
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request data"},
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )

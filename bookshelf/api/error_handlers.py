"""Error Handlers: global exception handlers for the bookshelf API.

Invariants:
    - BookshelfError → its http_status with {"error": public_message}
    - RequestValidationError (undecodable or mistyped body) → 400 "invalid JSON body"
    - Starlette HTTPException (unknown route, wrong method) → same {"error": ...} shape
    - Exception (catch-all) → 500 "internal error", never leaks internal details

Design Decisions:
    - Four-layer handler: domain, request decoding, routing, catch-all
    - Extracted from main.py to keep the entry point small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookshelf.core.errors import (
    BookshelfError, ErrorSeverity, InvalidJSONBodyError, INTERNAL_ERROR_MESSAGE,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_bookshelf_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_bookshelf_error_handler(app: FastAPI) -> None:

    @app.exception_handler(BookshelfError)
    async def bookshelf_error_handler(request: Request, exc: BookshelfError):
        """Handle all bookshelf domain/infrastructure errors."""
        level = _LOG_LEVELS.get(exc.severity, logging.INFO)
        logger.log(
            level,
            f"BookshelfError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "book_id": exc.context.book_id,
                "operation": exc.context.operation,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Undecodable body: the field-level detail is logged, not returned."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        error = InvalidJSONBodyError()
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )

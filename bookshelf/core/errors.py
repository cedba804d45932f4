"""Error Hierarchy: typed, categorized exceptions for every bookshelf failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/404) carry their message verbatim into the response
    - Internal errors (500) always answer "internal error"; detail stays in logs
    - to_response() produces the {"error": message} envelope used by every route

Design Decisions:
    - Single hierarchy with BookshelfError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - Callers discriminate by class (NotFoundError, InvalidInputError, InternalError),
      never by comparing message text
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


INTERNAL_ERROR_MESSAGE = "internal error"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BAD_REQUEST = "bad_request"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Context attached to an error for logging only."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    book_id: int | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class BookshelfError(Exception):
    """Base exception for all bookshelf errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def public_message(self) -> str:
        return self.message

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.public_message}


# ─── Client Errors (400/404) ────────────────────────────────────

class InvalidInputError(BookshelfError):
    """Client-supplied data fails a semantic rule (title/author/year)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class BadRequestError(BookshelfError):
    """Malformed request shape: fixed messages only."""
    def __init__(
        self, message: str, code: str = "BAD_REQUEST",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.BAD_REQUEST,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidJSONBodyError(BadRequestError):
    """Request body could not be decoded into the expected payload."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("invalid JSON body", "INVALID_JSON_BODY", context)


class InvalidIdError(BadRequestError):
    """Path identifier is not a positive integer."""
    def __init__(self, raw: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"raw_id": raw}
        super().__init__("invalid id", "INVALID_ID", ctx)


class UnsupportedOperationError(BadRequestError):
    """URL operation is not one of the recognized names."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__("unsupported operation", "UNSUPPORTED_OPERATION", ctx)


class NotFoundError(BookshelfError):
    """Referenced resource identifier does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.book_id = resource_id
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Internal Errors (500) ──────────────────────────────────────

class InternalError(BookshelfError):
    """Storage or infrastructure failure. Message never reaches the client."""
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        category: ErrorCategory = ErrorCategory.INTERNAL,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, category, ErrorSeverity.CRITICAL, context, 500,
        )

    @property
    def public_message(self) -> str:
        return INTERNAL_ERROR_MESSAGE


class DatabaseError(InternalError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE, ctx,
        )
        self.operation = operation


class StoreTimeoutError(InternalError):
    """Store operation exceeded its execution window."""
    def __init__(
        self, operation: str, timeout_seconds: float,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Store {operation} exceeded {timeout_seconds}s",
            "STORE_TIMEOUT", ErrorCategory.TIMEOUT, ctx,
        )
        self.operation = operation
        self.timeout_seconds = timeout_seconds

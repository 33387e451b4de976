"""Error Hierarchy — typed, categorized exceptions for every Blogsphere failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) name the condition; storage errors (500-level) are opaque
    - to_response() produces the public envelope {"error": message}
    - log_context() carries the detail for logs (missing fields, failed operation),
      never copied into the response body

Design Decisions:
    - Single hierarchy with BlogsphereError base: one FastAPI handler renders all of them
    - Severity picks the log level in the handler: WARNING for client errors, ERROR otherwise
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"


SERVER_ERROR_MESSAGE = "Server error"


class BlogsphereError(Exception):
    """Base exception for all Blogsphere errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the public REST error body."""
        return {"error": self.message}

    def log_context(self) -> dict:
        """Structured fields for the log record (logging `extra=`)."""
        return {
            "error_code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class MissingFieldsError(BlogsphereError):
    """Required submission fields absent, empty, or not strings."""
    def __init__(self, fields: list[str], message: str):
        super().__init__(
            message, "MISSING_FIELDS", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.fields = fields

    def log_context(self) -> dict:
        return {**super().log_context(), "fields": self.fields}


class MalformedBodyError(BlogsphereError):
    """Request body could not be decoded as JSON or as a form."""
    def __init__(self):
        super().__init__(
            "Malformed request body", "MALFORMED_BODY",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(BlogsphereError):
    """Document store operation failed."""
    def __init__(self, operation: str):
        super().__init__(
            SERVER_ERROR_MESSAGE, "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation

    def log_context(self) -> dict:
        return {**super().log_context(), "operation": self.operation}

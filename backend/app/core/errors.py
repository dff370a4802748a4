"""Error Hierarchy — typed, categorized exceptions for all Bookstore failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the {"error": {"message", "status"}} envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BookstoreError base: FastAPI global handler catches all
    - message may be a list: schema validation reports every violation at once
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"


class BookstoreError(Exception):
    """Base exception for all Bookstore errors."""

    def __init__(
        self,
        message: str | list[str],
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {
            "error": {
                "message": self.message,
                "status": self.http_status,
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class BookValidationError(BookstoreError):
    """Request body violates the Book schema."""
    def __init__(self, messages: list[str]):
        super().__init__(
            list(messages), "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )


class IsbnMismatchError(BookValidationError):
    """PUT body isbn differs from the isbn in the path."""
    def __init__(self, path_isbn: str):
        super().__init__(
            [f"instance.isbn does not match the isbn in the path '{path_isbn}'"],
        )
        self.code = "ISBN_MISMATCH"
        self.path_isbn = path_isbn


class BookNotFoundError(BookstoreError):
    """No book row has the requested isbn."""
    def __init__(self, isbn: str):
        super().__init__(
            f"There is no book with an isbn '{isbn}'",
            "BOOK_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.isbn = isbn


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(BookstoreError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation

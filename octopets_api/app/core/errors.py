"""
Error hierarchy for the listings API.

Every error carries a code, a category and a severity, and knows the
HTTP status it maps to.  The handlers in ``error_handlers`` convert
them into a uniform JSON envelope at the application boundary, so
endpoints simply raise.

Not‑found is deliberately absent from this module: a missing listing
is an expected outcome that repositories report by returning ``None``
or ``False``.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""

    VALIDATION = "validation"
    OPERATIONAL = "operational"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """When the error was raised; echoed in the response envelope."""

    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class OctopetsError(Exception):
    """Base exception for all errors raised by the API."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: Optional[ErrorContext] = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> Dict[str, Any]:
        """Convert to the standard REST error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


class CrudDisabledError(OctopetsError):
    """A write operation was attempted while ``ENABLE_CRUD`` is off."""

    def __init__(self, operation: str, context: Optional[ErrorContext] = None):
        super().__init__(
            "CRUD operations are currently disabled",
            "CRUD_DISABLED",
            ErrorCategory.OPERATIONAL,
            ErrorSeverity.ERROR,
            context,
            500,
        )
        self.operation = operation


class DatabaseError(OctopetsError):
    """A SQLite operation failed."""

    def __init__(self, message: str, operation: str, context: Optional[ErrorContext] = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR",
            ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL,
            context,
            500,
        )
        self.operation = operation

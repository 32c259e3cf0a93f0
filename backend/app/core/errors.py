"""Error Hierarchy — typed, categorized exceptions for all workbench failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - InvalidArgumentError is the ONLY error raised by core/ (factorial, fibonacci)
    - Everything else in core/ reports rejection through Status or bool returns
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with TechniquesError base: FastAPI global handler catches all
    - InvalidArgumentError also subclasses ValueError: plain callers can catch the
      builtin without importing this module
    - ErrorContext as dataclass: observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    technique: str | None = None
    argument: str | None = None
    debug_info: dict[str, Any] | None = None


class TechniquesError(Exception):
    """Base exception for all workbench errors."""

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

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "technique": self.context.technique,
                    "argument": self.context.argument,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidArgumentError(TechniquesError, ValueError):
    """Precondition violated by the caller (e.g. negative sequence index)."""
    def __init__(
        self, message: str, argument: str, value: Any,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.argument = argument
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.argument = argument
        self.value = value


class InputTooLargeError(TechniquesError):
    """Request exceeds the configured computation limit."""
    def __init__(self, argument: str, value: int, limit: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.argument = argument
        super().__init__(
            f"{argument}={value} exceeds the configured limit ({limit})",
            "INPUT_TOO_LARGE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.limit = limit


class DemonstrationNotFoundError(TechniquesError):
    """Requested demonstration section does not exist."""
    def __init__(self, section: int, context: ErrorContext | None = None):
        super().__init__(
            f"Demonstration section '{section}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.section = section

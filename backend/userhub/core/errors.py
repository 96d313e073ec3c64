"""Error Hierarchy — typed, categorized exceptions for UserHub failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors map to 4xx, unexpected failures to 500
    - to_response() produces the single REST error envelope used by every handler:
      code, message, category, severity, timestamp, context (+ details for validation)
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with UserHubError base: one global handler catches all
    - ErrorContext as dataclass: request metadata travels with the error, not the logger
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    ROUTING = "routing"
    HTTP = "http"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request metadata attached to an error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    method: str | None = None


class UserHubError(Exception):
    """Base exception for all UserHub errors."""

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
                    "path": self.context.path,
                    "method": self.context.method,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class RequestValidationFailedError(UserHubError):
    """Request parameters failed Pydantic validation."""
    def __init__(
        self, details: list[dict[str, Any]], context: ErrorContext | None = None,
    ):
        super().__init__(
            "Invalid request data",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.details = details

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response


class RouteNotFoundError(UserHubError):
    """No route matches the request path."""
    def __init__(self, path: str, context: ErrorContext | None = None):
        super().__init__(
            f"Route '{path}' not found",
            "ROUTE_NOT_FOUND", ErrorCategory.ROUTING,
            ErrorSeverity.WARNING, context, 404,
        )
        self.path = path


class MethodNotAllowedError(UserHubError):
    """Path exists but does not accept the request method."""
    def __init__(
        self, method: str, path: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Method {method} not allowed on '{path}'",
            "METHOD_NOT_ALLOWED", ErrorCategory.ROUTING,
            ErrorSeverity.WARNING, context, 405,
        )
        self.method = method
        self.path = path


class HTTPStatusError(UserHubError):
    """Any other framework-raised HTTP error, passed through with its status."""
    def __init__(
        self, status_code: int, message: str, context: ErrorContext | None = None,
    ):
        severity = ErrorSeverity.CRITICAL if status_code >= 500 else ErrorSeverity.WARNING
        super().__init__(
            message, f"HTTP_{status_code}", ErrorCategory.HTTP,
            severity, context, status_code,
        )


# ─── Server Errors (500-level) ──────────────────────────────────

class InternalError(UserHubError):
    """Unhandled failure; the message never carries the original exception."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )

"""Error Hierarchy — typed, categorized exceptions for all seosync failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Component operations never raise these past their boundary: they travel
      inside Err values (core/result.py) and are raised only by the HTTP shell
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SeoSyncError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    GENERATION = "generation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DOM_PRECONDITION = "dom_precondition"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    page_id: str | None = None
    component: str | None = None
    url: str | None = None
    debug_info: dict[str, Any] | None = None


class SeoSyncError(Exception):
    """Base exception for all seosync errors."""

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
                    "page_id": self.context.page_id,
                    "component": self.context.component,
                    "url": self.context.url,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class EntryValidationError(SeoSyncError):
    """Input for a registry or content operation is unusable."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class SchemaValidationError(SeoSyncError):
    """Structured-data document is not an object or lacks @context/@type."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "SCHEMA_INVALID", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 422,
        )


class ResourceNotFoundError(SeoSyncError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DomPreconditionError(SeoSyncError):
    """A required document element is absent."""
    def __init__(self, element_id: str, context: ErrorContext | None = None):
        super().__init__(
            f"Container with id {element_id} not found",
            "DOM_PRECONDITION_FAILED", ErrorCategory.DOM_PRECONDITION,
            ErrorSeverity.WARNING, context, 409,
        )
        self.element_id = element_id


# ─── Generation / Infrastructure Errors (500-level) ─────────────

class GenerationError(SeoSyncError):
    """A tag, schema or artifact builder failed."""
    def __init__(
        self,
        message: str,
        component: str | None = None,
        causes: list[Exception] | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        if component and not ctx.component:
            ctx.component = component
        super().__init__(
            message, "GENERATION_FAILED", ErrorCategory.GENERATION,
            ErrorSeverity.ERROR, ctx, 500,
        )
        self.causes = causes or []


class AnalyticsDeliveryError(SeoSyncError):
    """Analytics sink rejected or failed to receive an event."""
    def __init__(self, message: str, event_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Analytics event '{event_name}' not delivered: {message}",
            "ANALYTICS_DELIVERY_FAILED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.WARNING, context, 502,
        )
        self.event_name = event_name

"""Error Hierarchy: typed, categorized exceptions for every sync failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries a human-readable message fit for the last-error slot
    - to_response() produces the REST envelope used by the API error handlers
    - All sync errors are recoverable at the UI level; none is retried

Design Decisions:
    - Single hierarchy with RecordbookError base: FastAPI global handler catches all
    - One subclass per taxonomy kind so callers can branch with isinstance
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    CONNECTIVITY = "connectivity"
    VALIDATION = "validation"
    ACCESS_POLICY = "access_policy"
    CONFLICT = "conflict"
    SCHEMA = "schema"
    DATABASE = "database"
    EXTERNAL_API = "external_api"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity_kind: str | None = None
    entity_id: int | None = None
    operation: str | None = None
    backend_code: str | None = None


class RecordbookError(Exception):
    """Base exception for all Recordbook errors."""

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
                    "entity_kind": self.context.entity_kind,
                    "entity_id": self.context.entity_id,
                    "operation": self.context.operation,
                    "backend_code": self.context.backend_code,
                },
            }
        }


# ─── Local Errors (raised before any gateway call) ──────────────

class SimulatedDisconnectError(RecordbookError):
    """Simulated-offline toggle blocked a mutating call."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "SIMULATED_DISCONNECT", ErrorCategory.CONNECTIVITY,
            ErrorSeverity.WARNING, context, 503,
        )


class ValidationRejectedError(RecordbookError):
    """Validator rejected the supplied fields."""
    def __init__(
        self, message: str, reason: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_REJECTED", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.reason = reason


# ─── Backend Errors (classified gateway failures) ───────────────

class AccessDeniedError(RecordbookError):
    """Row-level-security / access policy denied the write."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "ACCESS_DENIED", ErrorCategory.ACCESS_POLICY,
            ErrorSeverity.ERROR, context, 403,
        )


class ReferentialConflictError(RecordbookError):
    """Delete rejected because dependent rows still reference the target."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "REFERENTIAL_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class SilentNoOpError(RecordbookError):
    """Delete reported no error but removed nothing."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "SILENT_NO_OP", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class SchemaMissingError(RecordbookError):
    """Backing tables do not exist yet; the init script must be run."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "SCHEMA_MISSING", ErrorCategory.SCHEMA,
            ErrorSeverity.CRITICAL, context, 503,
        )


class BackendFailureError(RecordbookError):
    """Any other gateway failure (network, malformed request, unknown code)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "BACKEND_FAILURE", ErrorCategory.DATABASE,
            ErrorSeverity.ERROR, context, 502,
        )


# ─── Collaborator Errors ────────────────────────────────────────

class TextGenerationError(RecordbookError):
    """Text-generation API call failed."""
    def __init__(
        self, message: str, api_error_type: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Text generation error ({api_error_type}): {message}",
            "TEXT_GENERATION_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 503,
        )
        self.api_error_type = api_error_type

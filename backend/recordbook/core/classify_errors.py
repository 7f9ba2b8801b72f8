"""Error Classification: raw gateway failures -> exactly one taxonomy kind.

Invariants:
    - refresh failures classify only as SchemaMissingError or BackendFailureError
    - write failures classify as AccessDeniedError, ReferentialConflictError
      (delete only) or BackendFailureError
    - Structured SQLSTATE codes decide first; message matching is a fallback
    - Every returned error carries a locale-specific, human-readable message

Design Decisions:
    - Message-substring fallbacks kept in one table (_MESSAGE_FALLBACKS) so the
      fragile part is isolated and visible; codes never depend on it
    - Foreign-key violation checked before access denial on delete: a referenced
      row is the more specific diagnosis when a backend reports both
"""

from recordbook.core.domain_types import Locale, Operation
from recordbook.core.errors import (
    AccessDeniedError,
    BackendFailureError,
    ErrorContext,
    RecordbookError,
    ReferentialConflictError,
    SchemaMissingError,
    SilentNoOpError,
    SimulatedDisconnectError,
    ValidationRejectedError,
)
from recordbook.core.gateway_protocols import GatewayError
from recordbook.core.language_strings import get_string

# PostgreSQL SQLSTATE codes
INSUFFICIENT_PRIVILEGE = "42501"
FOREIGN_KEY_VIOLATION = "23503"
UNDEFINED_TABLE = "42P01"

# Gateway raised something other than GatewayError
UNKNOWN_BACKEND_CODE = "UNKNOWN"

_MESSAGE_FALLBACKS: dict[str, tuple[str, ...]] = {
    INSUFFICIENT_PRIVILEGE: ("row-level security",),
    UNDEFINED_TABLE: ("does not exist",),
}


def matches(err: GatewayError, sqlstate: str) -> bool:
    """True when err carries sqlstate, or its message matches the fallback text."""
    if err.code == sqlstate:
        return True
    message = err.message or ""
    return any(p in message for p in _MESSAGE_FALLBACKS.get(sqlstate, ()))


def as_gateway_error(exc: BaseException) -> GatewayError:
    """Pass GatewayError through; wrap anything else an adapter let escape."""
    if isinstance(exc, GatewayError):
        return exc
    return GatewayError(
        UNKNOWN_BACKEND_CODE, str(exc) or exc.__class__.__name__,
    )


def classify_refresh_failure(
    err: GatewayError,
    locale: Locale = Locale.RU,
    context: ErrorContext | None = None,
) -> RecordbookError:
    """Classify a failed select during refresh."""
    ctx = _with_backend_code(context, err, Operation.SELECT)
    if matches(err, UNDEFINED_TABLE):
        return SchemaMissingError(get_string("schema_missing", locale), ctx)
    return BackendFailureError(
        get_string("refresh_failed", locale, detail=err.message), ctx,
    )


def classify_write_failure(
    operation: Operation,
    err: GatewayError,
    locale: Locale = Locale.RU,
    context: ErrorContext | None = None,
) -> RecordbookError:
    """Classify a failed insert/update/delete."""
    ctx = _with_backend_code(context, err, operation)
    if operation == Operation.DELETE and err.code == FOREIGN_KEY_VIOLATION:
        return ReferentialConflictError(
            get_string("referential_conflict", locale), ctx,
        )
    if matches(err, INSUFFICIENT_PRIVILEGE):
        return AccessDeniedError(
            get_string(f"access_denied_{operation.value}", locale), ctx,
        )
    key = "delete_failed" if operation == Operation.DELETE else "write_failed"
    return BackendFailureError(get_string(key, locale, detail=err.message), ctx)


# ─── Locally raised kinds ───────────────────────────────────────

def simulated_disconnect(
    operation: Operation,
    locale: Locale = Locale.RU,
    context: ErrorContext | None = None,
) -> SimulatedDisconnectError:
    """Blocked mutation; only insert points the user at the online toggle."""
    key = (
        "simulated_disconnect_insert" if operation == Operation.INSERT
        else "simulated_disconnect"
    )
    return SimulatedDisconnectError(get_string(key, locale), context)


def validation_rejected(
    reason: str, locale: Locale = Locale.RU, context: ErrorContext | None = None,
) -> ValidationRejectedError:
    return ValidationRejectedError(
        get_string("validation_rejected", locale, reason=reason), reason, context,
    )


def silent_no_op(
    locale: Locale = Locale.RU, context: ErrorContext | None = None,
) -> SilentNoOpError:
    return SilentNoOpError(get_string("silent_no_op", locale), context)


def _with_backend_code(
    context: ErrorContext | None, err: GatewayError, operation: Operation,
) -> ErrorContext:
    ctx = context or ErrorContext()
    ctx.backend_code = err.code
    ctx.operation = ctx.operation or operation.value
    return ctx

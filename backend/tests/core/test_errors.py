"""Error Hierarchy: verifies codes, categories and the REST envelope."""

import pytest

from recordbook.core.errors import (
    AccessDeniedError, BackendFailureError, ErrorCategory, ErrorContext,
    RecordbookError, ReferentialConflictError, SchemaMissingError,
    SilentNoOpError, SimulatedDisconnectError, TextGenerationError,
    ValidationRejectedError,
)


@pytest.mark.parametrize("err, code, status", [
    (SimulatedDisconnectError("m"), "SIMULATED_DISCONNECT", 503),
    (ValidationRejectedError("m", "r"), "VALIDATION_REJECTED", 400),
    (AccessDeniedError("m"), "ACCESS_DENIED", 403),
    (ReferentialConflictError("m"), "REFERENTIAL_CONFLICT", 409),
    (SilentNoOpError("m"), "SILENT_NO_OP", 409),
    (SchemaMissingError("m"), "SCHEMA_MISSING", 503),
    (BackendFailureError("m"), "BACKEND_FAILURE", 502),
])
def test_taxonomy_codes(err, code, status):
    assert isinstance(err, RecordbookError)
    assert err.code == code
    assert err.http_status == status
    assert str(err) == "m"


def test_to_response_envelope():
    ctx = ErrorContext(entity_kind="records", entity_id=4, operation="delete")
    body = SilentNoOpError("nothing deleted", ctx).to_response()["error"]
    assert body["code"] == "SILENT_NO_OP"
    assert body["message"] == "nothing deleted"
    assert body["category"] == ErrorCategory.CONFLICT.value
    assert body["context"]["entity_id"] == 4


def test_validation_keeps_reason():
    err = ValidationRejectedError("ОШИБКА ВАЛИДАЦИИ: x", "x")
    assert err.reason == "x"


def test_text_generation_error_message():
    err = TextGenerationError("boom", "timeout")
    assert err.message == "Text generation error (timeout): boom"
    assert err.api_error_type == "timeout"

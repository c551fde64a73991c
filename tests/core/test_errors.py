"""Error Hierarchy — verifies codes, HTTP statuses and the REST envelope.

Tests:
    - Each error kind maps to its documented status (400 / 404 / 500)
    - StoreUnavailableError is a StoreError with its own code
    - to_response() carries code, message, category, severity and context
"""

from user_service.core.errors import (
    ConfigurationError, ErrorCategory, ErrorContext, ErrorSeverity,
    InvalidIdError, InvalidInputError, StoreError, StoreUnavailableError,
    UserNotFoundError, UserServiceError,
)


def test_all_errors_share_base_class():
    errors = [
        InvalidIdError("x"),
        InvalidInputError("bad", "name"),
        UserNotFoundError("abc"),
        StoreError("boom", "insert"),
        StoreUnavailableError("down", "find"),
        ConfigurationError("missing", "MONGOURI"),
    ]
    assert all(isinstance(e, UserServiceError) for e in errors)


def test_client_errors_are_400():
    assert InvalidIdError("x").http_status == 400
    assert InvalidInputError("bad", "title").http_status == 400


def test_not_found_is_404_with_default_message():
    err = UserNotFoundError("64b7f0c2e1d3a4b5c6d7e8f9")
    assert err.http_status == 404
    assert err.message == "User '64b7f0c2e1d3a4b5c6d7e8f9' not found"
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND


def test_not_found_message_can_be_overridden():
    err = UserNotFoundError("abc", "No user found with specified ID")
    assert err.message == "No user found with specified ID"
    assert err.context.user_id == "abc"


def test_store_error_keeps_driver_text():
    err = StoreError("connection reset by peer", "update")
    assert err.http_status == 500
    assert err.code == "STORE_ERROR"
    assert "connection reset by peer" in err.message
    assert err.context.operation == "update"
    assert err.severity == ErrorSeverity.CRITICAL


def test_store_unavailable_is_store_error():
    err = StoreUnavailableError("no servers", "find")
    assert isinstance(err, StoreError)
    assert err.code == "STORE_UNAVAILABLE"
    assert err.http_status == 500


def test_to_response_envelope():
    ctx = ErrorContext(user_id="abc", operation="delete")
    body = UserNotFoundError("abc", context=ctx).to_response()
    error = body["error"]
    assert error["code"] == "USER_NOT_FOUND"
    assert error["category"] == "resource_not_found"
    assert error["severity"] == "warning"
    assert error["context"] == {"user_id": "abc", "operation": "delete"}
    assert error["timestamp"] == ctx.timestamp.isoformat()


def test_invalid_id_message_for_empty_and_malformed():
    assert InvalidIdError("").message == "invalid ID"
    assert InvalidIdError("nope").message == "invalid ID: 'nope'"


def test_invalid_input_response_carries_details():
    details = [{"field": "body.name", "message": "Field required", "type": "missing"}]
    err = InvalidInputError("Invalid request data", "body.name", details)
    body = err.to_response()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"] == details
    assert err.field == "body.name"


def test_invalid_input_details_default_empty():
    assert InvalidInputError("bad", "name").to_response()["error"]["details"] == []

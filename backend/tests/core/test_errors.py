"""Error hierarchy — codes, HTTP statuses, and the REST error envelope."""

import pytest

from app.core.errors import (
    AuthenticationError, ConflictError, DatabaseError, ErrorContext,
    PortfolioError, RegistrationClosedError, ReorderValidationError,
    ResourceNotFoundError, TransactionAbortedError,
)


@pytest.mark.parametrize("error, code, status", [
    (ReorderValidationError("bad ids"), "REORDER_VALIDATION_ERROR", 400),
    (AuthenticationError(), "AUTHENTICATION_FAILED", 401),
    (RegistrationClosedError(), "REGISTRATION_CLOSED", 403),
    (ResourceNotFoundError("Project", "abc"), "RESOURCE_NOT_FOUND", 404),
    (ConflictError("User already exists"), "CONFLICT", 409),
    (TransactionAbortedError("write failed"), "TRANSACTION_ABORTED", 500),
    (DatabaseError("timeout", "execute"), "DATABASE_ERROR", 503),
])
def test_error_codes_and_statuses(error, code, status):
    assert isinstance(error, PortfolioError)
    assert error.code == code
    assert error.http_status == status


def test_response_envelope_shape():
    error = ReorderValidationError("ids must be a non-empty array of project IDs",
                                   ErrorContext(featured=True))
    body = error.to_response()

    assert body["success"] is False
    assert body["error"]["code"] == "REORDER_VALIDATION_ERROR"
    assert body["error"]["category"] == "validation"
    assert body["error"]["severity"] == "warning"
    assert body["error"]["context"]["featured"] is True


def test_not_found_carries_resource_id():
    error = ResourceNotFoundError("Project", "abc")
    assert error.context.resource_id == "abc"
    assert error.message == "Project 'abc' not found"


def test_user_message_overrides_internal_message():
    error = DatabaseError("deadlock on projects", "commit",
                          ErrorContext(user_message="Please retry"))
    assert error.to_response()["error"]["message"] == "Please retry"


def test_transaction_aborted_prefixes_message():
    assert TransactionAbortedError("x").message == "Transaction aborted: x"

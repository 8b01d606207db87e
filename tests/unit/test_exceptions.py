"""Unit tests for the exception hierarchy."""

from jsend_payload.exceptions import (
    ConfigurationError,
    EnvelopeEncodingError,
    FailError,
    InvalidArgumentError,
    JsendError,
)


def test_invalid_argument_error():
    """InvalidArgumentError should capture the argument and stay a ValueError."""

    error = InvalidArgumentError("'message' is required", argument="message")
    assert error.message == "'message' is required"
    assert error.argument == "message"
    assert isinstance(error, JsendError)
    assert isinstance(error, ValueError)


def test_encoding_error_keeps_original():
    original = TypeError("Object of type object is not JSON serializable")
    error = EnvelopeEncodingError("cannot encode", original_error=original)

    assert error.original_error is original
    assert str(error) == "cannot encode"


def test_configuration_error_key():
    error = ConfigurationError("missing", key="JSEND_LOG_DIR")
    assert error.key == "JSEND_LOG_DIR"


def test_fail_error_defaults():
    errors = [{"field": "email", "error": "required", "message": "needed"}]
    error = FailError(errors)

    assert error.errors is errors
    assert error.code == 400
    assert error.meta is None
    assert error.message == "Request failed"

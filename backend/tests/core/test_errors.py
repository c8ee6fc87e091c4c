"""Error Hierarchy: every kind maps to a status, message and public body.

Tests cover:
    - ERROR_TABLE is exhaustive over ErrorKind
    - Client input errors are 4xx, upstream/internal are 500
    - to_response never includes upstream details
    - ConfigurationError sits outside the per-request hierarchy
"""

import pytest

from contact_relay.core.errors import (
    ERROR_TABLE,
    ConfigurationError,
    ContactRelayError,
    ErrorCategory,
    ErrorKind,
    InternalRelayError,
    InvalidEmailError,
    InvalidJsonError,
    MessageTooLongError,
    MissingFieldsError,
    ResendDeliveryError,
)


def test_error_table_covers_every_kind():
    assert set(ERROR_TABLE) == set(ErrorKind)


@pytest.mark.parametrize("exc, status, body", [
    (InvalidJsonError(), 400, {"error": "Invalid JSON", "code": "invalid_json"}),
    (MissingFieldsError(["name"]), 400,
     {"error": "Missing name, email, or message", "code": "missing_fields"}),
    (InvalidEmailError(), 400, {"error": "Invalid email address", "code": "invalid_email"}),
    (MessageTooLongError(5001, 5000), 413, {"error": "Message too long", "code": "too_long"}),
    (ResendDeliveryError(422, "bad from"), 500,
     {"error": "Failed to send message", "code": "resend_error"}),
    (InternalRelayError("boom"), 500, {"error": "Internal Error", "code": "internal_error"}),
])
def test_error_status_and_body(exc, status, body):
    assert exc.http_status == status
    assert exc.to_response() == body


def test_client_errors_are_4xx_and_others_500():
    for kind, spec in ERROR_TABLE.items():
        if spec.category is ErrorCategory.CLIENT_INPUT:
            assert 400 <= spec.http_status < 500, kind
        else:
            assert spec.http_status == 500, kind


def test_resend_error_keeps_upstream_detail_off_the_response():
    exc = ResendDeliveryError(422, "domain not verified")
    assert exc.status_code == 422
    assert exc.body == "domain not verified"
    assert "domain not verified" in str(exc)
    assert "domain not verified" not in str(exc.to_response())


def test_configuration_error_is_not_a_request_error():
    exc = ConfigurationError(["resend_api_key"])
    assert not isinstance(exc, ContactRelayError)
    assert "resend_api_key" in str(exc)

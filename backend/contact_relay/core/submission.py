"""Submission Validation: parses and validates a contact-form body before any IO.

Invariants:
    - A Submission is either fully valid or never constructed
    - NaN, Infinity and -Infinity are not JSON: parse_json_body rejects them
    - Check order: missing fields → email shape → message length
    - Absent, null or non-string fields count as empty text
    - MAX_MESSAGE_LENGTH (5000) counts Python code points; exactly 5000 passes

Design Decisions:
    - EMAIL_PATTERN is deliberately loose (local@domain.tld shape only), not RFC 5322
"""

import json
import re
from dataclasses import dataclass
from typing import Any

from contact_relay.core.errors import (
    InvalidEmailError,
    InvalidJsonError,
    MessageTooLongError,
    MissingFieldsError,
)


MAX_MESSAGE_LENGTH: int = 5000
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
REQUIRED_FIELDS = ("name", "email", "message")


@dataclass(frozen=True)
class Submission:
    """One validated contact-form submission. Lives for a single request."""
    name: str
    email: str
    message: str


def _reject_constant(token: str):
    raise ValueError(f"Non-JSON constant: {token}")


def parse_json_body(raw: bytes) -> Any:
    """Decode the raw request body as strict JSON or raise InvalidJsonError."""
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueError
        raise InvalidJsonError(str(e)) from e


def _field_text(payload: Any, field: str) -> str:
    if not isinstance(payload, dict):
        return ""
    value = payload.get(field)
    if not isinstance(value, str):
        return ""
    return value.strip()


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_submission(payload: Any) -> Submission:
    """Validate a decoded JSON payload. Pure: raises on the first failing rule."""
    fields = {field: _field_text(payload, field) for field in REQUIRED_FIELDS}

    missing = [field for field, value in fields.items() if not value]
    if missing:
        raise MissingFieldsError(missing)

    if not is_valid_email(fields["email"]):
        raise InvalidEmailError()

    if len(fields["message"]) > MAX_MESSAGE_LENGTH:
        raise MessageTooLongError(len(fields["message"]), MAX_MESSAGE_LENGTH)

    return Submission(**fields)

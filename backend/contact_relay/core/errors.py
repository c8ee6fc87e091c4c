"""Error Hierarchy: typed, categorized exceptions for every contact relay failure mode.

Invariants:
    - ErrorKind is closed; ERROR_TABLE maps every kind to (status, message, category)
    - to_response() produces {"error": message, "code": kind}, never upstream details
    - Client input errors are 4xx; upstream and internal errors are 500
    - ConfigurationError is NOT a ContactRelayError: no handler ever turns it into a response

Design Decisions:
    - Single hierarchy with ContactRelayError base: one FastAPI handler catches all
    - Status and message live in ERROR_TABLE, not in subclasses
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    CLIENT_INPUT = "client_input"
    UPSTREAM = "upstream"
    INTERNAL = "internal"


class ErrorKind(str, Enum):
    """Stable machine-readable error codes returned to callers."""
    INVALID_JSON = "invalid_json"
    MISSING_FIELDS = "missing_fields"
    INVALID_EMAIL = "invalid_email"
    TOO_LONG = "too_long"
    RESEND_ERROR = "resend_error"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class ErrorSpec:
    http_status: int
    message: str
    category: ErrorCategory


ERROR_TABLE: dict[ErrorKind, ErrorSpec] = {
    ErrorKind.INVALID_JSON: ErrorSpec(
        400, "Invalid JSON", ErrorCategory.CLIENT_INPUT,
    ),
    ErrorKind.MISSING_FIELDS: ErrorSpec(
        400, "Missing name, email, or message", ErrorCategory.CLIENT_INPUT,
    ),
    ErrorKind.INVALID_EMAIL: ErrorSpec(
        400, "Invalid email address", ErrorCategory.CLIENT_INPUT,
    ),
    ErrorKind.TOO_LONG: ErrorSpec(
        413, "Message too long", ErrorCategory.CLIENT_INPUT,
    ),
    ErrorKind.RESEND_ERROR: ErrorSpec(
        500, "Failed to send message", ErrorCategory.UPSTREAM,
    ),
    ErrorKind.INTERNAL_ERROR: ErrorSpec(
        500, "Internal Error", ErrorCategory.INTERNAL,
    ),
}


class ContactRelayError(Exception):
    """Base exception for all per-request contact relay errors."""

    def __init__(self, kind: ErrorKind, detail: str | None = None):
        spec = ERROR_TABLE[kind]
        super().__init__(detail or spec.message)
        self.kind = kind
        self.code = kind.value
        self.message = spec.message
        self.http_status = spec.http_status
        self.category = spec.category
        self.detail = detail

    def to_response(self) -> dict:
        """Convert to the public JSON error body."""
        return {"error": self.message, "code": self.code}


# ─── Client Input Errors (4xx) ──────────────────────────────────

class InvalidJsonError(ContactRelayError):
    """Request body is not parseable JSON."""
    def __init__(self, detail: str | None = None):
        super().__init__(ErrorKind.INVALID_JSON, detail)


class MissingFieldsError(ContactRelayError):
    """name, email or message is empty after trimming."""
    def __init__(self, missing: list[str]):
        super().__init__(
            ErrorKind.MISSING_FIELDS, f"Missing fields: {', '.join(missing)}",
        )
        self.missing = missing


class InvalidEmailError(ContactRelayError):
    def __init__(self):
        super().__init__(ErrorKind.INVALID_EMAIL)


class MessageTooLongError(ContactRelayError):
    def __init__(self, length: int, limit: int):
        super().__init__(
            ErrorKind.TOO_LONG, f"Message length {length} exceeds {limit}",
        )
        self.length = length
        self.limit = limit


# ─── Upstream / Internal Errors (500) ───────────────────────────

class ResendDeliveryError(ContactRelayError):
    """Resend answered with a non-success status."""
    def __init__(self, status_code: int, body: str):
        super().__init__(
            ErrorKind.RESEND_ERROR, f"Resend API error ({status_code}): {body}",
        )
        self.status_code = status_code
        self.body = body


class InternalRelayError(ContactRelayError):
    """Transport failure or unexpected exception while relaying."""
    def __init__(self, detail: str | None = None):
        super().__init__(ErrorKind.INTERNAL_ERROR, detail)


# ─── Fatal Configuration Error ──────────────────────────────────

class ConfigurationError(Exception):
    """Required configuration is missing or invalid. Fatal at startup."""

    def __init__(self, fields: list[str], detail: str = ""):
        super().__init__(
            f"Invalid or missing configuration: {', '.join(fields)}",
        )
        self.fields = fields
        self.detail = detail

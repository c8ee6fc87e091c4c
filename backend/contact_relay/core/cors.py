"""CORS Policy Resolver: pure mapping from request origin to response headers.

Invariants:
    - Allow-listed origins are echoed back verbatim
    - Any other origin, including a missing header, falls back to policy.default_origin
    - Vary: Origin and Allow-Methods: POST, OPTIONS are always present
    - Allow-Headers reflects Access-Control-Request-Headers when given, else Content-Type
"""

from dataclasses import dataclass


ALLOWED_METHODS = "POST, OPTIONS"
DEFAULT_ALLOWED_HEADERS = "Content-Type"


@dataclass(frozen=True)
class CorsPolicy:
    """Immutable allow-list plus fallback origin and preflight cache lifetime."""
    allowed_origins: tuple[str, ...]
    default_origin: str
    max_age: int = 86_400


def resolve_cors_headers(
    origin: str | None,
    policy: CorsPolicy,
    requested_headers: str | None = None,
) -> dict[str, str]:
    """Build the CORS response headers for one request. Pure."""
    allowed = origin if origin in policy.allowed_origins else policy.default_origin
    allow_headers = (
        requested_headers.strip()
        if requested_headers and requested_headers.strip()
        else DEFAULT_ALLOWED_HEADERS
    )
    return {
        "Access-Control-Allow-Origin": allowed,
        "Vary": "Origin",
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": allow_headers,
        "Access-Control-Max-Age": str(policy.max_age),
    }

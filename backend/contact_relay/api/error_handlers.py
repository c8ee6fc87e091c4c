"""Error Handlers: global exception handlers for the contact relay API.

Invariants:
    - ContactRelayError → {"error": message, "code": kind} with the kind's status
    - Router-level 405 (methods the contact route does not list) → plain-text 405 with CORS headers
    - Exception (catch-all) → internal_error body, never leaks internal details
    - ConfigurationError is re-raised by the catch-all: fatal, never rendered as a response
    - CORS headers resolved by the route (request.state.cors_headers) ride on every error
    - Upstream status/body are logged, never returned

Design Decisions:
    - Three-layer handler: domain (ContactRelayError), HTTP (Starlette), catch-all (Exception)
    - Client input errors log at warning; upstream and internal at error
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from contact_relay.config import get_settings
from contact_relay.core.cors import resolve_cors_headers
from contact_relay.core.errors import (
    ConfigurationError, ContactRelayError, ErrorCategory, ErrorKind, InternalRelayError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_relay_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _cors_headers(request: Request) -> dict[str, str]:
    return getattr(request.state, "cors_headers", {})


def _resolve_cors_headers(request: Request) -> dict[str, str]:
    """CORS headers for requests that never reached the contact route."""
    settings_provider = request.app.dependency_overrides.get(get_settings, get_settings)
    return resolve_cors_headers(
        request.headers.get("origin"),
        settings_provider().cors_policy,
        request.headers.get("access-control-request-headers"),
    )


def _log_extra(request: Request, code: str) -> dict:
    return {
        "error_code": code,
        "path": request.url.path,
        "origin": request.headers.get("origin"),
    }


def _register_relay_error_handler(app: FastAPI) -> None:
    """Register contact relay domain/infrastructure error handler."""

    @app.exception_handler(ContactRelayError)
    async def relay_error_handler(request: Request, exc: ContactRelayError):
        level = (
            logging.WARNING if exc.category is ErrorCategory.CLIENT_INPUT
            else logging.ERROR
        )
        logger.log(
            level, f"ContactRelayError: {exc}",
            extra=_log_extra(request, exc.code),
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(),
            headers=_cors_headers(request),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register router-level HTTP error handler (non-standard methods)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code != status.HTTP_405_METHOD_NOT_ALLOWED:
            return await http_exception_handler(request, exc)
        logger.info(
            f"Rejected {request.method} {request.url.path}",
            extra={"method": request.method, "path": request.url.path},
        )
        return PlainTextResponse(
            "Method Not Allowed",
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            headers={**(exc.headers or {}), **_resolve_cors_headers(request)},
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        if isinstance(exc, ConfigurationError):
            raise exc
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra=_log_extra(request, ErrorKind.INTERNAL_ERROR.value),
        )
        return JSONResponse(
            status_code=500,
            content=InternalRelayError().to_response(),
            headers=_cors_headers(request),
        )

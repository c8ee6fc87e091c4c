"""Contact Route: the single catch-all endpoint for preflight and submissions.

Invariants:
    - Every path and every standard method lands here; other methods get the same 405 from api/error_handlers.py
    - CORS headers resolved first and attached to every response, errors included
    - OPTIONS → 204 empty; non-POST → 405 plain text; POST → relay_contact
    - Route holds no business logic; validation and sending live in services/core
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from contact_relay.api.dependencies import get_mailer
from contact_relay.config import Settings, get_settings
from contact_relay.core.cors import resolve_cors_headers
from contact_relay.core.dispatch import RequestStage, classify_method
from contact_relay.schemas.email import ContactAccepted
from contact_relay.services.relay_contact import Mailer, relay_contact

logger = logging.getLogger(__name__)
router = APIRouter(tags=["contact"])

HANDLED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


def get_cors_headers(
    request: Request, settings: Settings = Depends(get_settings),
) -> dict[str, str]:
    """Resolve CORS headers and stash them for the error handlers."""
    headers = resolve_cors_headers(
        request.headers.get("origin"),
        settings.cors_policy,
        request.headers.get("access-control-request-headers"),
    )
    request.state.cors_headers = headers
    return headers


@router.api_route("/{path:path}", methods=HANDLED_METHODS)
async def handle_contact(
    request: Request,
    path: str,
    cors_headers: dict[str, str] = Depends(get_cors_headers),
    settings: Settings = Depends(get_settings),
    mailer: Mailer = Depends(get_mailer),
):
    stage = classify_method(request.method)

    if stage is RequestStage.PREFLIGHT:
        return Response(status_code=status.HTTP_204_NO_CONTENT, headers=cors_headers)

    if stage is RequestStage.REJECT:
        logger.info(
            f"Rejected {request.method} /{path}",
            extra={"method": request.method, "path": request.url.path},
        )
        return PlainTextResponse(
            "Method Not Allowed",
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            headers=cors_headers,
        )

    await relay_contact(await request.body(), settings, mailer)
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=ContactAccepted().model_dump(),
        headers=cors_headers,
    )

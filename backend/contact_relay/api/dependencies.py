"""Route dependencies: settings-backed collaborators for the contact route."""

from fastapi import Depends

from contact_relay.config import Settings, get_settings
from contact_relay.infrastructure.resend_client import ResendClient


def get_mailer(settings: Settings = Depends(get_settings)) -> ResendClient:
    """FastAPI dependency for the outbound email client."""
    return ResendClient(
        api_key=settings.resend_api_key,
        api_url=settings.resend_api_url,
        timeout_seconds=settings.resend_timeout_seconds,
    )

"""Resend Client: sends one OutboundEmail to the Resend API and maps failures.

Invariants:
    - Exactly one POST per send_email call, no retries
    - Transport failures (connect, timeout, protocol) → InternalRelayError
    - Non-2xx responses → ResendDeliveryError carrying status and body (logged, never returned)
    - A fresh httpx.AsyncClient per call; nothing pooled between requests
"""

import logging

import httpx

from contact_relay.core.errors import InternalRelayError, ResendDeliveryError
from contact_relay.schemas.email import OutboundEmail

logger = logging.getLogger(__name__)


class ResendClient:
    """Thin async wrapper around the Resend /emails endpoint."""

    def __init__(
        self,
        api_key: str,
        api_url: str = "https://api.resend.com/emails",
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout_seconds = timeout_seconds
        # Tests inject httpx.MockTransport here
        self._transport = transport

    async def send_email(self, email: OutboundEmail) -> dict:
        """POST the message once. Returns the upstream JSON on success."""
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self._transport,
            ) as client:
                response = await client.post(
                    self.api_url,
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json",
                    },
                    json=email.to_payload(),
                )
        except httpx.HTTPError as e:
            logger.error(f"Resend request failed: {e!r}", exc_info=True)
            raise InternalRelayError(f"Resend transport error: {e!r}") from e

        if not response.is_success:
            logger.error(
                f"Resend API error: {response.status_code} {response.text}",
                extra={"upstream_status": response.status_code},
            )
            raise ResendDeliveryError(response.status_code, response.text)

        try:
            result = response.json()
        except ValueError:
            result = {"raw": response.text}
        logger.info(
            f"Resend send result: {result}",
            extra={"upstream_status": response.status_code},
        )
        return result

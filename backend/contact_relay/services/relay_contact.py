"""Relay Contact: orchestrates one submission from raw body to delivered email.

Invariants:
    - Validation completes before any outbound call
    - The mailer is called at most once per submission
    - Errors propagate as ContactRelayError subclasses; the API layer renders them
"""

import logging
from typing import Protocol

from contact_relay.config import Settings
from contact_relay.core.render_email import build_subject, render_html_body
from contact_relay.core.submission import (
    Submission, parse_json_body, validate_submission,
)
from contact_relay.schemas.email import OutboundEmail

logger = logging.getLogger(__name__)


class Mailer(Protocol):
    async def send_email(self, email: OutboundEmail) -> dict: ...


def build_outbound_email(submission: Submission, settings: Settings) -> OutboundEmail:
    """Assemble the Resend payload for a validated submission."""
    return OutboundEmail(
        from_address=settings.from_address,
        to=settings.primary_recipient,
        bcc=settings.bcc_list,
        reply_to=submission.email,
        subject=build_subject(submission.name, settings.site_name),
        html=render_html_body(submission, settings.site_name),
    )


async def relay_contact(raw_body: bytes, settings: Settings, mailer: Mailer) -> dict:
    """Parse, validate, render and send. Returns the mailer's result."""
    submission = validate_submission(parse_json_body(raw_body))
    email = build_outbound_email(submission, settings)
    logger.debug(f"Relaying contact submission ({len(submission.message)} chars)")
    return await mailer.send_email(email)

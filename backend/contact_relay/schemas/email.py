"""Email Schemas: outbound Resend payload and public success body.

Invariants:
    - OutboundEmail serializes from_address under the "from" key
    - bcc is always a list, possibly empty
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class OutboundEmail(BaseModel):
    """Message payload posted to the Resend /emails endpoint."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    from_address: str = Field(alias="from")
    to: str
    bcc: list[str] = Field(default_factory=list)
    reply_to: str
    subject: str
    html: str

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class ContactAccepted(BaseModel):
    """Success acknowledgment returned to the form."""
    success: Literal[True] = True

"""Request Dispatcher: classifies an inbound method into a handling stage.

Invariants:
    - OPTIONS → PREFLIGHT (204, CORS headers only)
    - POST → SUBMIT (body validation and send)
    - Everything else → REJECT (405, plain text)
"""

from enum import Enum


class RequestStage(str, Enum):
    PREFLIGHT = "preflight"
    SUBMIT = "submit"
    REJECT = "reject"


def classify_method(method: str) -> RequestStage:
    method = method.upper()
    if method == "OPTIONS":
        return RequestStage.PREFLIGHT
    if method == "POST":
        return RequestStage.SUBMIT
    return RequestStage.REJECT

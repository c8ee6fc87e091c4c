"""API test fixtures: FastAPI test client with a faked Resend API.

Invariants:
    - get_settings overridden with explicit test Settings (no .env, fixed BCC list)
    - get_mailer overridden with a ResendClient on httpx.MockTransport
    - resend_api["requests"] records every outbound request
    - resend_api["handler"] decides the upstream response; replace it per test
"""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from contact_relay.api.dependencies import get_mailer
from contact_relay.config import get_settings, load_settings
from contact_relay.infrastructure.resend_client import ResendClient
from contact_relay.main import app

RESEND_URL = "https://api.resend.test/emails"


@pytest.fixture
def test_settings():
    return load_settings(
        _env_file=None,
        from_address="JRHOF Website <noreply@jrhof.org>",
        primary_recipient="info@jrhof.org",
        resend_api_key="re_test_key",
        resend_api_url=RESEND_URL,
        bcc_recipients="board@jrhof.org, ,archive@jrhof.org",
    )


@pytest.fixture
def resend_api():
    state = {
        "requests": [],
        "handler": lambda request: httpx.Response(200, json={"id": "msg_1"}),
    }

    def dispatch(request: httpx.Request):
        state["requests"].append(request)
        return state["handler"](request)

    state["transport"] = httpx.MockTransport(dispatch)
    return state


@pytest.fixture
async def client(test_settings, resend_api):
    """FastAPI test client with settings and mailer overridden."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_mailer] = lambda: ResendClient(
        api_key=test_settings.resend_api_key,
        api_url=test_settings.resend_api_url,
        transport=resend_api["transport"],
    )

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def lenient_client(client):
    """Client that surfaces 500 responses instead of re-raising app exceptions."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

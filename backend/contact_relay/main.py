"""Contact Relay API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ContactRelayError → {"error", "code"} JSON responses
    - Settings validated on startup via lifespan; ConfigurationError aborts startup
    - No CORSMiddleware: the contact route resolves CORS itself (fallback origin, not omission)

Run with: uvicorn contact_relay.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from contact_relay.api.error_handlers import register_error_handlers
from contact_relay.api.routes import contact
from contact_relay.config import get_settings
from contact_relay.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    # Raises ConfigurationError on missing settings; intentionally not caught
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"Contact Relay API started (recipient={settings.primary_recipient}, "
        f"bcc={len(settings.bcc_list)})",
    )
    yield
    logger.info("Contact Relay API shutting down")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Contact Relay API", version="1.0.0", lifespan=lifespan,
        docs_url=None, redoc_url=None, openapi_url=None,
    )
    app.include_router(contact.router)
    register_error_handlers(app)
    return app


app = create_app()

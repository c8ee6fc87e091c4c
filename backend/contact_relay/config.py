"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - FROM_ADDRESS, PRIMARY_RECIPIENT and RESEND_API_KEY are required and non-blank
    - Missing required values raise ConfigurationError from load_settings(), never an HTTP response
    - get_settings() is cached (lru_cache): single instance per process
    - default_origin is always a member of allowed_origins

Design Decisions:
    - Settings are frozen and injected into the route via Depends(get_settings)
    - BCC_RECIPIENTS stays a raw comma-separated string; bcc_list parses it
"""

from functools import lru_cache

from pydantic import ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from contact_relay.core.cors import CorsPolicy
from contact_relay.core.errors import ConfigurationError

DEFAULT_ALLOWED_ORIGINS = [
    "https://jrhof-webapp.pages.dev",
    "https://www.jrhof.org",
    "https://jrhof.org",
]


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, frozen=True,
    )

    # Email (required)
    from_address: str
    primary_recipient: str
    resend_api_key: str
    bcc_recipients: str = ""

    @field_validator("from_address", "primary_recipient", "resend_api_key")
    @classmethod
    def require_non_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    # Resend
    resend_api_url: str = "https://api.resend.com/emails"
    resend_timeout_seconds: float = 10.0

    # CORS
    allowed_origins: list[str] = DEFAULT_ALLOWED_ORIGINS
    default_origin: str = DEFAULT_ALLOWED_ORIGINS[0]
    cors_max_age: int = 86_400

    @model_validator(mode="after")
    def default_origin_is_allowed(self) -> "Settings":
        if self.default_origin not in self.allowed_origins:
            raise ValueError(
                f"default_origin {self.default_origin!r} is not in allowed_origins",
            )
        return self

    # Email body
    site_name: str = "JRHOF"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def bcc_list(self) -> list[str]:
        """BCC_RECIPIENTS split on commas, trimmed, empties dropped."""
        return [
            address.strip()
            for address in self.bcc_recipients.split(",")
            if address.strip()
        ]

    @property
    def cors_policy(self) -> CorsPolicy:
        return CorsPolicy(
            allowed_origins=tuple(self.allowed_origins),
            default_origin=self.default_origin,
            max_age=self.cors_max_age,
        )


def load_settings(**overrides) -> Settings:
    """Build Settings, converting validation failures into ConfigurationError."""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = sorted({
            ".".join(str(loc) for loc in err["loc"]) or "settings"
            for err in e.errors()
        })
        raise ConfigurationError(fields, str(e)) from e


@lru_cache
def get_settings() -> Settings:
    return load_settings()

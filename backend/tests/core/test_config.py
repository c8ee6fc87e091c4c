"""Settings: required values, BCC parsing, CORS policy and fatal configuration errors.

Tests cover:
    - Required env vars missing or blank → ConfigurationError naming the field
    - BCC_RECIPIENTS split on commas, trimmed, empties dropped
    - cors_policy reflects the allow-list and default origin
    - default_origin must be allow-listed
"""

import pytest
from pydantic import ValidationError

from contact_relay.config import DEFAULT_ALLOWED_ORIGINS, get_settings, load_settings
from contact_relay.core.errors import ConfigurationError


def _load(**overrides):
    return load_settings(_env_file=None, **overrides)


@pytest.mark.parametrize("env_var, field", [
    ("FROM_ADDRESS", "from_address"),
    ("PRIMARY_RECIPIENT", "primary_recipient"),
    ("RESEND_API_KEY", "resend_api_key"),
])
def test_missing_required_setting_is_fatal(monkeypatch, env_var, field):
    monkeypatch.delenv(env_var, raising=False)
    with pytest.raises(ConfigurationError) as exc_info:
        _load()
    assert field in exc_info.value.fields


def test_blank_required_setting_is_fatal(monkeypatch):
    monkeypatch.setenv("RESEND_API_KEY", "   ")
    with pytest.raises(ConfigurationError) as exc_info:
        _load()
    assert exc_info.value.fields == ["resend_api_key"]


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("FROM_ADDRESS", "Site <noreply@site.example>")
    monkeypatch.setenv("PRIMARY_RECIPIENT", "owner@site.example")
    monkeypatch.setenv("RESEND_API_KEY", "re_live")
    settings = _load()
    assert settings.from_address == "Site <noreply@site.example>"
    assert settings.primary_recipient == "owner@site.example"
    assert settings.resend_api_key == "re_live"


def test_bcc_list_parsing(monkeypatch):
    monkeypatch.setenv("BCC_RECIPIENTS", " a@x.org, ,b@x.org,,  c@x.org  ,")
    assert _load().bcc_list == ["a@x.org", "b@x.org", "c@x.org"]


def test_bcc_list_empty_by_default(monkeypatch):
    monkeypatch.delenv("BCC_RECIPIENTS", raising=False)
    assert _load().bcc_list == []


def test_default_cors_policy():
    policy = _load().cors_policy
    assert policy.allowed_origins == tuple(DEFAULT_ALLOWED_ORIGINS)
    assert policy.default_origin == "https://jrhof-webapp.pages.dev"
    assert policy.max_age == 86_400


def test_allowed_origins_from_json_env(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", '["https://a.example", "https://b.example"]')
    monkeypatch.setenv("DEFAULT_ORIGIN", "https://b.example")
    policy = _load().cors_policy
    assert policy.allowed_origins == ("https://a.example", "https://b.example")
    assert policy.default_origin == "https://b.example"


def test_default_origin_must_be_allowed():
    with pytest.raises(ConfigurationError):
        _load(default_origin="https://elsewhere.example")


def test_settings_are_immutable():
    settings = _load()
    with pytest.raises(ValidationError):
        settings.resend_api_key = "changed"


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()

"""Tests for settings validation."""

import pytest
from pydantic import ValidationError

from talent_agency.config import Settings
from tests.conftest import SERVICE_KEY


def test_missing_admin_password_is_fatal(monkeypatch) -> None:
    monkeypatch.delenv("ADMIN_PASSWORD", raising=False)

    with pytest.raises(ValidationError):
        Settings(
            _env_file=None,
            session_secret="secret",
            supabase_url="https://example.supabase.co",
            supabase_service_key=SERVICE_KEY,
        )


def test_empty_admin_password_is_fatal() -> None:
    with pytest.raises(ValidationError):
        Settings(
            _env_file=None,
            admin_password="",
            session_secret="secret",
            supabase_url="https://example.supabase.co",
            supabase_service_key=SERVICE_KEY,
        )


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("ADMIN_PASSWORD", "from-env")
    monkeypatch.setenv("SESSION_SECRET", "signing-key")
    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_KEY", SERVICE_KEY)
    monkeypatch.setenv("REQUIRE_SURNAME", "true")

    settings = Settings(_env_file=None)

    assert settings.admin_password == "from-env"
    assert settings.require_surname is True
    assert settings.cloudinary_configured is False


def test_cloudinary_configured_needs_every_credential(settings: Settings) -> None:
    partial = settings.model_copy(update={"cloudinary_cloud_name": "demo"})
    full = partial.model_copy(
        update={"cloudinary_api_key": "key", "cloudinary_api_secret": "secret"}
    )

    assert partial.cloudinary_configured is False
    assert full.cloudinary_configured is True

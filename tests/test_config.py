"""Tests for configuration helpers."""

import pytest

from meal_composer.config import Settings, parse_allowed_origins


@pytest.mark.parametrize("raw", [None, "", "  ", "*"])
def test_parse_allowed_origins_defaults_to_any(raw: str | None) -> None:
    assert parse_allowed_origins(raw) == ["*"]


def test_parse_allowed_origins_splits_and_trims() -> None:
    raw = "https://plan.example.com/, http://localhost:5173 ,"

    assert parse_allowed_origins(raw) == [
        "https://plan.example.com",
        "http://localhost:5173",
    ]


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_KEY", "service-key")
    monkeypatch.setenv("API_TOKEN", "api")
    monkeypatch.setenv("ADMIN_TOKEN", "admin")
    monkeypatch.setenv("CATALOG_TTL_SECONDS", "60")

    settings = Settings()

    assert settings.catalog_ttl_seconds == 60
    assert settings.cors_allowed_origins is None

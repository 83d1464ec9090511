"""
tests.api.test_settings

Purpose:
    Environment overrides for service settings.
"""

from __future__ import annotations

from bunny_app.api.settings import Settings, get_settings


def test_defaults(monkeypatch) -> None:
    for name in ("BUNNY_APP_HOST", "PORT", "BUNNY_APP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    assert get_settings() == Settings()
    assert get_settings().port == 8080


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("BUNNY_APP_HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "3000")
    monkeypatch.setenv("BUNNY_APP_LOG_LEVEL", "debug")

    s = get_settings()
    assert s.host == "127.0.0.1"
    assert s.port == 3000
    assert s.log_level == "DEBUG"


def test_blank_env_values_are_ignored(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "  ")
    assert get_settings().port == 8080

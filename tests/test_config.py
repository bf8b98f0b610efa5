"""Tests for settings loading."""

from diet_planner.config import Settings


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("DEBUG", raising=False)

    settings = Settings()

    assert settings.debug is False


def test_settings_read_debug_from_env(monkeypatch) -> None:
    monkeypatch.setenv("DEBUG", "true")

    settings = Settings()

    assert settings.debug is True

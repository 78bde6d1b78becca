"""Unit tests for hook settings."""

import pytest
from pydantic import ValidationError

from toc_hook.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("TOC_HOOK_TOOL", "TOC_HOOK_MARKDOWN_SUFFIX", "TOC_HOOK_DEBUG"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    """Test the default settings."""
    settings = Settings()

    assert settings.TOOL == "update_markdown_toc"
    assert settings.MARKDOWN_SUFFIX == ".md"
    assert settings.DEBUG is False


def test_environment_overrides(monkeypatch):
    """Test that prefixed environment variables override the defaults."""
    monkeypatch.setenv("TOC_HOOK_TOOL", "doctoc")
    monkeypatch.setenv("TOC_HOOK_MARKDOWN_SUFFIX", ".markdown")
    monkeypatch.setenv("TOC_HOOK_DEBUG", "true")

    settings = Settings()

    assert settings.TOOL == "doctoc"
    assert settings.MARKDOWN_SUFFIX == ".markdown"
    assert settings.DEBUG is True


def test_unprefixed_variables_ignored(monkeypatch):
    """Test that unrelated DEBUG or TOOL variables in the shell are not read."""
    monkeypatch.setenv("DEBUG", "express:*")
    monkeypatch.setenv("TOOL", "something-else")
    monkeypatch.setenv("TOC_TOOL", "doctoc")

    settings = Settings()

    assert settings.DEBUG is False
    assert settings.TOOL == "update_markdown_toc"


def test_invalid_prefixed_value(monkeypatch):
    """Test that a bad prefixed value is rejected."""
    monkeypatch.setenv("TOC_HOOK_DEBUG", "express:*")

    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached():
    """Test that get_settings returns the same instance."""
    assert get_settings() is get_settings()

"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from imggen.core.config import Settings, load_settings
from imggen.core.exceptions import ConfigurationError, UsageError


def test_missing_api_key_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        load_settings()

    assert exc_info.value.key == "IMGGEN_API_KEY"
    assert "IMGGEN_API_KEY was not set." in str(exc_info.value)
    assert isinstance(exc_info.value, UsageError)


def test_defaults_applied(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IMGGEN_API_KEY", "sk-test")

    settings = load_settings()

    assert settings == Settings(api_key="sk-test", api_endpoint="https://api.openai.com/v1", timeout=120.0)


def test_endpoint_override_strips_trailing_slash(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IMGGEN_API_KEY", "sk-test")
    monkeypatch.setenv("IMGGEN_API_ENDPOINT", "https://proxy.example.com/v1/")

    assert load_settings().api_endpoint == "https://proxy.example.com/v1"


def test_timeout_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IMGGEN_API_KEY", "sk-test")
    monkeypatch.setenv("IMGGEN_TIMEOUT", "12.5")

    assert load_settings().timeout == 12.5


@pytest.mark.parametrize("raw", ["soon", "0", "-3"])
def test_invalid_timeout_rejected(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("IMGGEN_API_KEY", "sk-test")
    monkeypatch.setenv("IMGGEN_TIMEOUT", raw)

    with pytest.raises(ConfigurationError) as exc_info:
        load_settings()

    assert exc_info.value.key == "IMGGEN_TIMEOUT"

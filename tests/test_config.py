"""Test the configuration module."""

import pytest
from pydantic import ValidationError

from extension_helpers.config import get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_when_env_is_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    """Settings should fall back to their defaults."""
    for name in ("LOG_LEVEL", "BATCH_SIZE", "SHUFFLE_SEED", "SEPARATOR"):
        monkeypatch.delenv(f"EXTENSION_HELPERS_{name}", raising=False)

    settings = get_settings()

    assert settings.log_level == "WARNING"
    assert settings.batch_size == 10
    assert settings.shuffle_seed is None
    assert settings.separator == " "


def test_values_can_be_overridden_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prefixed env vars should override the defaults."""
    monkeypatch.setenv("EXTENSION_HELPERS_BATCH_SIZE", "4")
    monkeypatch.setenv("EXTENSION_HELPERS_SHUFFLE_SEED", "99")
    monkeypatch.setenv("EXTENSION_HELPERS_LOG_LEVEL", "DEBUG")

    settings = get_settings()

    assert settings.batch_size == 4
    assert settings.shuffle_seed == 99
    assert settings.log_level == "DEBUG"


def test_non_positive_batch_size_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    """A batch size of zero should fail validation."""
    monkeypatch.setenv("EXTENSION_HELPERS_BATCH_SIZE", "0")

    with pytest.raises(ValidationError):
        get_settings()


def test_settings_are_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    """get_settings should return the same instance until the cache is cleared."""
    monkeypatch.delenv("EXTENSION_HELPERS_BATCH_SIZE", raising=False)

    assert get_settings() is get_settings()

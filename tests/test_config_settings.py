"""
Tests for src/config/settings.py

These tests verify environment parsing, validation, and the settings singleton.
"""

import logging

import pytest

from src.config.settings import (
    DateJugglerSettings,
    get_settings,
    reset_settings,
)


def test_from_env_defaults():
    """Test that unset variables give an unseeded WARNING configuration."""
    settings = DateJugglerSettings.from_env()

    assert settings.seed is None
    assert settings.log_level == "WARNING"
    assert settings.log_level_value == logging.WARNING


def test_from_env_reads_seed_and_level(monkeypatch):
    """Test that DATEJUGGLER_SEED and DATEJUGGLER_LOG_LEVEL are parsed."""
    monkeypatch.setenv("DATEJUGGLER_SEED", " 1234 ")
    monkeypatch.setenv("DATEJUGGLER_LOG_LEVEL", "debug")

    settings = DateJugglerSettings.from_env()

    assert settings.seed == 1234
    assert settings.log_level == "DEBUG"
    assert settings.log_level_value == logging.DEBUG


def test_from_env_empty_seed_means_unseeded(monkeypatch):
    """Test that an empty DATEJUGGLER_SEED is treated as unset."""
    monkeypatch.setenv("DATEJUGGLER_SEED", "")

    assert DateJugglerSettings.from_env().seed is None


def test_from_env_rejects_non_integer_seed(monkeypatch):
    """Test that a malformed seed fails fast with the variable name."""
    monkeypatch.setenv("DATEJUGGLER_SEED", "abc")

    with pytest.raises(ValueError, match="DATEJUGGLER_SEED must be an integer"):
        DateJugglerSettings.from_env()


def test_from_env_rejects_unknown_log_level(monkeypatch):
    """Test that an unknown level name fails fast."""
    monkeypatch.setenv("DATEJUGGLER_LOG_LEVEL", "LOUD")

    with pytest.raises(ValueError, match="DATEJUGGLER_LOG_LEVEL"):
        DateJugglerSettings.from_env()


def test_direct_construction_validates_level():
    """Test that __post_init__ rejects bad levels on direct construction."""
    with pytest.raises(ValueError, match="log_level"):
        DateJugglerSettings(log_level="verbose")


def test_get_settings_caches_until_reset(monkeypatch):
    """Test the lazy singleton and its reset hook."""
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("DATEJUGGLER_SEED", "5")
    # Still cached
    assert get_settings().seed is None

    reset_settings()
    assert get_settings().seed == 5

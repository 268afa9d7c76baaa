"""Unit tests for settings loading."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from hotel_reservations.config import load_settings


def test_defaults(monkeypatch):
    """Test settings defaults without environment overrides."""
    for name in ("LOG_LEVEL", "PREMIUM_DISCOUNT_RATE", "ENVIRONMENT", "APP_NAME", "CURRENCY_SYMBOL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir("/")

    settings = load_settings()

    assert settings.log_level == "INFO"
    assert settings.premium_discount_rate == Decimal("0.15")
    assert settings.app_name == "hotel-reservations"
    assert settings.currency_symbol == "$"


def test_environment_overrides(monkeypatch):
    """Test values are read case-insensitively from the environment."""
    monkeypatch.setenv("log_level", "DEBUG")
    monkeypatch.setenv("PREMIUM_DISCOUNT_RATE", "0.20")

    settings = load_settings()

    assert settings.log_level == "DEBUG"
    assert settings.premium_discount_rate == Decimal("0.20")


def test_discount_rate_must_be_below_one(monkeypatch):
    """Test an out-of-range discount is rejected."""
    monkeypatch.setenv("PREMIUM_DISCOUNT_RATE", "1.5")

    with pytest.raises(ValidationError):
        load_settings()

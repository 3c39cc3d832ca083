"""
Tests for application settings.
"""

import pytest
from pydantic import ValidationError

from app.config import Environment, Settings


def test_environment_is_case_insensitive():
    assert Settings(environment="Testing").environment == Environment.TESTING


def test_production_refuses_default_secrets():
    with pytest.raises(ValidationError):
        Settings(environment="production")


def test_production_with_configured_secrets():
    settings = Settings(environment="production", pepper="p3pp3r", hmac_key="k3y")
    assert settings.is_production()


def test_bcrypt_rounds_lower_bound():
    with pytest.raises(ValidationError):
        Settings(bcrypt_rounds=3)

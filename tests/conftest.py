"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests
    │   ├── presentation/      # LoginRouter, errors, response helpers
    │   ├── infrastructure/    # Email validator
    │   ├── sesame_auth/       # Password, JWT and auth services
    │   └── sesame_config/     # Settings
    └── integration/
        └── api/           # FastAPI adapter through TestClient
"""

import pytest
from pydantic import SecretStr

from sesame_config import Settings, clear_settings_cache

TEST_EMAIL = "any_email@mail.com"
TEST_PASSWORD = "any_password"


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Drop cached settings before and after the test session."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from any .env file on the machine."""
    return Settings(
        _env_file=None,
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        log_level="DEBUG",
    )

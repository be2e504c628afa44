"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Force the test environment (APP_ENV=test, no .env file)
  - Provide in-memory repository and sample users
  - Register test markers

Collaborators:
  - pytest: Test framework
  - users_api.infrastructure.repositories.InMemoryUserRepository

Notes:
  - APP_ENV must be set BEFORE users_api modules read settings
  - Use @pytest.fixture(scope="function") for per-test isolation
"""

import os
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("APP_ENV", "test")

from users_api.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from users_api.domain.entities import User, UserFields  # noqa: E402
from users_api.infrastructure.repositories import InMemoryUserRepository  # noqa: E402


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (require PostgreSQL)"
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    """R: Fresh in-memory repository per test."""
    return InMemoryUserRepository()


@pytest.fixture
def ada_fields() -> UserFields:
    return UserFields(name="Ada Lovelace", email="ada@example.com")


@pytest.fixture
def sample_user() -> User:
    return User(id=1, name="Ada Lovelace", email="ada@example.com")


@pytest.fixture
def clear_settings_cache():
    """R: Reset cached Settings so monkeypatched env vars take effect."""
    app_config.get_settings.cache_clear()
    yield
    app_config.get_settings.cache_clear()

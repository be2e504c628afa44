"""
Name: Integration Test DB Setup

Responsibilities:
  - Ensure the users schema exists before integration tests run
  - Run Alembic migrations once per test session
  - Own the process pool for the session and truncate `users` between tests

Notes:
  - Only runs when RUN_INTEGRATION=1
  - Uses DATABASE_URL from environment (falls back to POSTGRES_* parts)
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from users_api.crosscutting.config import get_settings
from users_api.infrastructure.db.migrations import run_migrations
from users_api.infrastructure.db.pool import close_pool, get_pool, init_pool

DB_USER = os.getenv("POSTGRES_USER", "postgres")
DB_PASSWORD = os.getenv("POSTGRES_PASSWORD", "postgres")
DB_HOST = os.getenv("POSTGRES_HOST", "localhost")
DB_PORT = os.getenv("POSTGRES_HOST_PORT", "5432")
DB_NAME = os.getenv("POSTGRES_DB", "users")
DEFAULT_DATABASE_URL = (
    f"postgresql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"

if os.getenv("RUN_INTEGRATION") == "1":
    os.environ["APP_ENV"] = "integration"
    os.environ.setdefault("DATABASE_URL", DEFAULT_DATABASE_URL)
    get_settings.cache_clear()


@pytest.fixture(scope="session", autouse=True)
def init_db_pool():
    """Migrate to head and open the pool once per session."""
    if os.getenv("RUN_INTEGRATION") != "1":
        yield
        return

    database_url = get_settings().get_database_url()
    run_migrations(str(ALEMBIC_INI), database_url)
    pool = init_pool(database_url=database_url, min_size=1, max_size=2)
    yield pool
    close_pool()


@pytest.fixture(autouse=True)
def clean_users_table():
    if os.getenv("RUN_INTEGRATION") != "1":
        yield
        return

    with get_pool().connection() as conn:
        conn.execute("TRUNCATE TABLE users RESTART IDENTITY")
    yield

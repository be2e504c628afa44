"""
Name: Alembic Migration Runner Tests

Responsibilities:
  - Validate Alembic Config wiring (script_location, database URL)
  - Validate failures are wrapped as DatabaseError
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from users_api.crosscutting.exceptions import DatabaseError
from users_api.infrastructure.db.migrations import build_alembic_config, run_migrations

pytestmark = pytest.mark.unit

ROOT_DIR = Path(__file__).resolve().parents[3]
ALEMBIC_INI = str(ROOT_DIR / "alembic.ini")


def test_build_config_resolves_script_location(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "")

    cfg = build_alembic_config(ALEMBIC_INI, "postgresql://u:p@db/users")

    assert Path(cfg.get_main_option("script_location")) == ROOT_DIR / "alembic"
    assert cfg.attributes["database_url"] == "postgresql://u:p@db/users"
    assert os.environ["DATABASE_URL"] == ""


def test_run_migrations_upgrades_to_head(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "")

    with patch("users_api.infrastructure.db.migrations.command.upgrade") as upgrade:
        run_migrations(ALEMBIC_INI, "postgresql://u:p@db/users")

    upgrade.assert_called_once()
    assert upgrade.call_args.args[1] == "head"


def test_run_migrations_wraps_failures(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "")

    with patch(
        "users_api.infrastructure.db.migrations.command.upgrade",
        side_effect=RuntimeError("connection refused"),
    ):
        with pytest.raises(DatabaseError, match="Schema migration failed"):
            run_migrations(ALEMBIC_INI, "postgresql://u:p@db/users")


def test_percent_encoded_url_is_passed_verbatim(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "")
    url = "postgresql://u:p%40ss@db/users"

    cfg = build_alembic_config(ALEMBIC_INI, url)

    assert cfg.attributes["database_url"] == url

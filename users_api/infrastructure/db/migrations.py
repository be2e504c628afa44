"""
===============================================================================
CRC CARD — infrastructure/db/migrations.py
===============================================================================

Componente:
  Ejecución de migraciones Alembic en el arranque

Responsabilidades:
  - Llevar el esquema a `head` antes de servir requests (si DB_AUTO_MIGRATE).
  - Traducir fallos a DatabaseError: el arranque debe abortar.

Colaboradores:
  - alembic.command / alembic.config.Config
  - alembic/env.py (lee la URL de cfg.attributes["database_url"])
===============================================================================
"""

from __future__ import annotations

from pathlib import Path

from alembic import command
from alembic.config import Config

from ...crosscutting.exceptions import DatabaseError
from ...crosscutting.logger import logger


def build_alembic_config(config_path: str, database_url: str) -> Config:
    """
    Construye la Config de Alembic.

    script_location se resuelve relativo al alembic.ini para que funcione
    independientemente del cwd del proceso (host de funciones, tests).
    """
    ini_path = Path(config_path).resolve()
    cfg = Config(str(ini_path))
    script_location = cfg.get_main_option("script_location") or "alembic"
    cfg.set_main_option(
        "script_location", str((ini_path.parent / script_location).resolve())
    )
    # attributes no pasa por configparser: `%` en la URL no se interpola.
    cfg.attributes["database_url"] = database_url
    return cfg


def run_migrations(config_path: str, database_url: str) -> None:
    """Aplica migraciones pendientes (upgrade head)."""
    cfg = build_alembic_config(config_path, database_url)
    logger.info("Aplicando migraciones", extra={"target": "head"})
    try:
        command.upgrade(cfg, "head")
    except Exception as exc:
        logger.exception("Migraciones fallaron")
        raise DatabaseError("Schema migration failed", original_error=exc) from exc
    logger.info("Migraciones aplicadas")

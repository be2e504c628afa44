"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/user.py
============================================================
Class: PostgresUserRepository

Responsibilities:
  - CRUD de usuarios sobre la tabla `users` (contrato con migraciones).
  - Mapear filas crudas -> entidad de dominio `User`.
  - Clasificar UNA vez cada fallo en PersistenceErrorKind y lanzarlo
    como UserPersistenceError (los use cases nunca ven errores de psycopg).

Collaborators:
  - psycopg_pool.ConnectionPool (pool de conexiones, compartido)
  - psycopg.errors.UniqueViolation (uq_users_email)
  - domain.entities.User / UserFields
  - crosscutting.logger.logger (logs)
  - crosscutting.exceptions.UserPersistenceError

Constraints / Notes:
  - SQL parametrizado siempre (nunca interpolar input de usuario).
  - Una sentencia por operación: sin transacciones multi-step, sin retries.
  - Orden estable en listados: id ASC.
============================================================
"""

from __future__ import annotations

from typing import Iterable, Literal

from psycopg import errors as pg_errors
from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import PersistenceErrorKind, UserPersistenceError
from ....crosscutting.logger import logger
from ....domain.entities import User, UserFields

# R: Lista explícita de columnas para mantener el contrato estable con migraciones.
_USER_COLUMNS = "id, name, email"

_UNIQUE_VIOLATION_SQLSTATE = "23505"

_Fetch = Literal["one", "all"]


def _row_to_user(row: tuple) -> User:
    return User(id=row[0], name=row[1], email=row[2])


def _classify(exc: Exception) -> PersistenceErrorKind:
    """
    Traduce una excepción del driver a la clasificación cerrada.

    UniqueViolation (SQLSTATE 23505) es la única violación esperable: el
    único constraint de unicidad de `users` es el email.
    """
    if isinstance(exc, pg_errors.UniqueViolation):
        return PersistenceErrorKind.CONSTRAINT_VIOLATION
    if getattr(exc, "sqlstate", None) == _UNIQUE_VIOLATION_SQLSTATE:
        return PersistenceErrorKind.CONSTRAINT_VIOLATION
    return PersistenceErrorKind.FAILURE


class PostgresUserRepository:
    """
    Repositorio PostgreSQL de usuarios.

    El pool lo abre el lifespan y lo inyecta el composition root.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    # ============================================================
    # Ejecución
    # ============================================================
    def _execute(
        self,
        *,
        operation: str,
        query: str,
        params: Iterable[object] = (),
        fetch: _Fetch,
        log_extra: dict[str, object],
    ):
        """
        Ejecuta una sentencia y clasifica cualquier fallo.

        - fetch="one" -> tuple | None
        - fetch="all" -> list[tuple]
        """
        log_msg = f"PostgresUserRepository: {operation} failed"
        try:
            with self._pool.connection() as conn:
                cursor = conn.execute(query, tuple(params))
                return cursor.fetchone() if fetch == "one" else cursor.fetchall()
        except Exception as exc:
            kind = _classify(exc)
            if kind is PersistenceErrorKind.CONSTRAINT_VIOLATION:
                logger.warning(log_msg, extra={**log_extra, "kind": kind.value})
            else:
                logger.exception(log_msg, extra={**log_extra, "kind": kind.value})
            raise UserPersistenceError(kind, log_msg, original_error=exc) from exc

    @staticmethod
    def _not_found(operation: str, user_id: int) -> UserPersistenceError:
        return UserPersistenceError(
            PersistenceErrorKind.NOT_FOUND,
            f"PostgresUserRepository: {operation}: user {user_id} not found",
        )

    # ============================================================
    # API del repositorio
    # ============================================================
    def create_user(self, fields: UserFields) -> User:
        row = self._execute(
            operation="create_user",
            query=f"""
                INSERT INTO users (name, email)
                VALUES (%s, %s)
                RETURNING {_USER_COLUMNS}
            """,
            params=(fields.name, fields.email),
            fetch="one",
            log_extra={"email": fields.email},
        )
        if not row:
            # INSERT ... RETURNING siempre devuelve fila; si no, es un fallo genérico.
            raise UserPersistenceError(
                PersistenceErrorKind.FAILURE,
                "PostgresUserRepository: create_user returned no row",
            )
        return _row_to_user(row)

    def get_user(self, user_id: int) -> User:
        row = self._execute(
            operation="get_user",
            query=f"SELECT {_USER_COLUMNS} FROM users WHERE id = %s",
            params=(user_id,),
            fetch="one",
            log_extra={"user_id": user_id},
        )
        if not row:
            raise self._not_found("get_user", user_id)
        return _row_to_user(row)

    def list_users(self) -> list[User]:
        rows = self._execute(
            operation="list_users",
            query=f"SELECT {_USER_COLUMNS} FROM users ORDER BY id ASC",
            fetch="all",
            log_extra={},
        )
        return [_row_to_user(r) for r in rows]

    def update_user(self, user_id: int, fields: UserFields) -> User:
        row = self._execute(
            operation="update_user",
            query=f"""
                UPDATE users
                SET name = %s, email = %s
                WHERE id = %s
                RETURNING {_USER_COLUMNS}
            """,
            params=(fields.name, fields.email, user_id),
            fetch="one",
            log_extra={"user_id": user_id, "email": fields.email},
        )
        if not row:
            raise self._not_found("update_user", user_id)
        return _row_to_user(row)

    def delete_user(self, user_id: int) -> None:
        row = self._execute(
            operation="delete_user",
            query="DELETE FROM users WHERE id = %s RETURNING id",
            params=(user_id,),
            fetch="one",
            log_extra={"user_id": user_id},
        )
        if not row:
            raise self._not_found("delete_user", user_id)

    def ping(self) -> bool:
        try:
            with self._pool.connection() as conn:
                conn.execute("SELECT 1").fetchone()
            return True
        except Exception as exc:
            logger.warning("PostgresUserRepository: ping failed", extra={"error": str(exc)})
            return False

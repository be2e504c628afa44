"""
===============================================================================
MÓDULO: Excepciones tipadas del backend (errores internos)
===============================================================================

Objetivo
--------
Tener excepciones internas coherentes, con:
- error_code estable
- error_id para correlación con logs
- message “humana” (sin filtrar secretos ni SQL)

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  UsersApiError + subclases

Responsabilidades:
  - Estandarizar errores de infraestructura antes de llegar a los use cases
  - Generar error_id para rastreo

Colaboradores:
  - infrastructure/repositories/* (lanzan UserPersistenceError)
  - api/exception_handlers.py (fallback para errores no clasificados)
===============================================================================
"""

from __future__ import annotations

from enum import Enum
from uuid import uuid4


class UsersApiError(Exception):
    """Base para errores internos del sistema (error_code + error_id + message)."""

    error_code: str = "USERS_API_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)


class DatabaseError(UsersApiError):
    """Errores de DB fuera de una operación de repositorio (pool, migraciones)."""

    error_code: str = "DATABASE_ERROR"


class PersistenceErrorKind(str, Enum):
    """
    Clasificación cerrada del resultado fallido de una operación de persistencia.

    Se decide UNA vez en el borde del repositorio; los use cases sólo hacen match.
    """

    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"
    NOT_FOUND = "NOT_FOUND"
    FAILURE = "FAILURE"


class UserPersistenceError(DatabaseError):
    """Fallo de una operación sobre `users`, ya clasificado."""

    error_code: str = "USER_PERSISTENCE_ERROR"

    def __init__(
        self,
        kind: PersistenceErrorKind,
        message: str,
        *,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.kind = kind


def is_constraint_violation(error: Exception | None) -> bool:
    """True si el error es una violación de unicidad (email duplicado)."""
    return (
        isinstance(error, UserPersistenceError)
        and error.kind is PersistenceErrorKind.CONSTRAINT_VIOLATION
    )


def is_not_found(error: Exception | None) -> bool:
    """True si el error indica que la fila no existe."""
    return (
        isinstance(error, UserPersistenceError)
        and error.kind is PersistenceErrorKind.NOT_FOUND
    )

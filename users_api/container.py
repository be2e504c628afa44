"""
===============================================================================
TARJETA CRC — users_api/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Construir el repositorio de usuarios a partir de recursos explícitos
    (pool abierto por el lifespan) y decidir in-memory vs Postgres.
  - Exponer factories de casos de uso para FastAPI (Depends).

Colaboradores:
  - users_api.crosscutting.config.get_settings
  - users_api.domain.repositories.UserRepository (puerto)
  - users_api.infrastructure.repositories (implementaciones)
  - users_api.application.usecases (casos de uso)

Notas:
  - Este archivo NO contiene lógica de negocio.
  - El repositorio vive en `app.state.user_repository`; lo publica el
    lifespan y se libera con él. No hay singletons de módulo.
===============================================================================
"""

from __future__ import annotations

from typing import Optional

from psycopg_pool import ConnectionPool
from starlette.requests import HTTPConnection

from .application.usecases import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from .crosscutting.config import get_settings
from .crosscutting.exceptions import DatabaseError
from .domain.repositories import UserRepository
from .infrastructure.repositories import (
    InMemoryUserRepository,
    PostgresUserRepository,
)

USER_REPOSITORY_STATE_KEY = "user_repository"


# =============================================================================
# Repositorio
# =============================================================================


def build_user_repository(pool: Optional[ConnectionPool] = None) -> UserRepository:
    """Repositorio de usuarios (in-memory en test/ci; Postgres sobre `pool`)."""
    if get_settings().is_test():
        return InMemoryUserRepository()
    if pool is None:
        raise DatabaseError("PostgresUserRepository requires an open connection pool")
    return PostgresUserRepository(pool=pool)


def get_user_repository(connection: HTTPConnection) -> UserRepository:
    """Repositorio publicado por el lifespan de la app que atiende el request."""
    repository = getattr(connection.app.state, USER_REPOSITORY_STATE_KEY, None)
    if repository is None:
        raise DatabaseError("User repository is not initialized (lifespan not run)")
    return repository


# =============================================================================
# Casos de uso (baratos; se construyen por request)
# =============================================================================


def get_create_user_use_case(connection: HTTPConnection) -> CreateUserUseCase:
    return CreateUserUseCase(get_user_repository(connection))


def get_get_user_use_case(connection: HTTPConnection) -> GetUserUseCase:
    return GetUserUseCase(get_user_repository(connection))


def get_list_users_use_case(connection: HTTPConnection) -> ListUsersUseCase:
    return ListUsersUseCase(get_user_repository(connection))


def get_update_user_use_case(connection: HTTPConnection) -> UpdateUserUseCase:
    return UpdateUserUseCase(get_user_repository(connection))


def get_delete_user_use_case(connection: HTTPConnection) -> DeleteUserUseCase:
    return DeleteUserUseCase(get_user_repository(connection))


__all__ = [
    "USER_REPOSITORY_STATE_KEY",
    "build_user_repository",
    "get_user_repository",
    "get_create_user_use_case",
    "get_get_user_use_case",
    "get_list_users_use_case",
    "get_update_user_use_case",
    "get_delete_user_use_case",
]

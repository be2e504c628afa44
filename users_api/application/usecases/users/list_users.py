"""
===============================================================================
USE CASE: List Users
===============================================================================

Lista todos los usuarios (sin paginación ni filtros).

Contrato:
    - Sin usuarios -> UserListResult(users=[]) (nunca None, nunca error).
    - Cualquier fallo -> PERSISTENCE_FAILURE ("Failed to retrieve users").
===============================================================================
"""

from __future__ import annotations

from ....crosscutting.exceptions import DatabaseError
from ....domain.repositories import UserRepository
from .user_results import UserListResult, persistence_failure

FAILURE_MESSAGE = "Failed to retrieve users"


class ListUsersUseCase:
    def __init__(self, repository: UserRepository) -> None:
        self._users = repository

    def execute(self) -> UserListResult:
        try:
            users = self._users.list_users()
        except DatabaseError:
            return UserListResult(error=persistence_failure(FAILURE_MESSAGE))

        return UserListResult(users=list(users))

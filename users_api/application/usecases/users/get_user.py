"""
===============================================================================
USE CASE: Get User
===============================================================================

Obtiene un usuario por id.

Error Mapping:
    - NOT_FOUND: no existe fila con ese id
    - PERSISTENCE_FAILURE: cualquier otro fallo ("Failed to retrieve user")
===============================================================================
"""

from __future__ import annotations

from ....crosscutting.exceptions import DatabaseError, is_not_found
from ....domain.repositories import UserRepository
from .user_results import UserResult, persistence_failure, user_not_found

FAILURE_MESSAGE = "Failed to retrieve user"


class GetUserUseCase:
    """Use Case (Query): lectura de un usuario por id."""

    def __init__(self, repository: UserRepository) -> None:
        self._users = repository

    def execute(self, user_id: int) -> UserResult:
        try:
            user = self._users.get_user(user_id)
        except DatabaseError as exc:
            if is_not_found(exc):
                return UserResult(error=user_not_found())
            return UserResult(error=persistence_failure(FAILURE_MESSAGE))

        return UserResult(user=user)

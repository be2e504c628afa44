"""
===============================================================================
USE CASE: Delete User
===============================================================================

Borrado físico de un usuario por id.

Error Mapping:
    - NOT_FOUND: no existe fila con ese id
    - PERSISTENCE_FAILURE: cualquier otro fallo ("Failed to delete user")
===============================================================================
"""

from __future__ import annotations

from ....crosscutting.exceptions import DatabaseError, is_not_found
from ....domain.repositories import UserRepository
from .user_results import DeleteUserResult, persistence_failure, user_not_found

FAILURE_MESSAGE = "Failed to delete user"


class DeleteUserUseCase:
    """Use Case (Command): baja física."""

    def __init__(self, repository: UserRepository) -> None:
        self._users = repository

    def execute(self, user_id: int) -> DeleteUserResult:
        try:
            self._users.delete_user(user_id)
        except DatabaseError as exc:
            if is_not_found(exc):
                return DeleteUserResult(error=user_not_found())
            return DeleteUserResult(error=persistence_failure(FAILURE_MESSAGE))

        return DeleteUserResult(deleted=True)

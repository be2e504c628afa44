"""
===============================================================================
USE CASE: Update User
===============================================================================

Name:
    Update User Use Case

Business Goal:
    Reemplazar name/email de un usuario existente. El id es inmutable.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    UpdateUserUseCase

Responsibilities:
    - Ejecutar exactamente un update_user en el repositorio.
    - Clasificar el fallo con dos predicados, en este orden:
        1) is_constraint_violation -> CONSTRAINT_VIOLATION
        2) is_not_found            -> NOT_FOUND
      cualquier otro -> PERSISTENCE_FAILURE ("Failed to update user").

Collaborators:
    - UserRepository.update_user(user_id, fields) -> User
    - crosscutting.exceptions (predicados)
    - user_results
===============================================================================
"""

from __future__ import annotations

from ....crosscutting.exceptions import (
    DatabaseError,
    is_constraint_violation,
    is_not_found,
)
from ....domain.entities import UserFields
from ....domain.repositories import UserRepository
from .user_results import (
    UserResult,
    email_taken,
    persistence_failure,
    user_not_found,
)

FAILURE_MESSAGE = "Failed to update user"


class UpdateUserUseCase:
    """Use Case (Command): actualización completa de name/email."""

    def __init__(self, repository: UserRepository) -> None:
        self._users = repository

    def execute(self, user_id: int, fields: UserFields) -> UserResult:
        try:
            user = self._users.update_user(user_id, fields)
        except DatabaseError as exc:
            # Prioridad: la violación de unicidad gana sobre not-found.
            if is_constraint_violation(exc):
                return UserResult(error=email_taken())
            if is_not_found(exc):
                return UserResult(error=user_not_found())
            return UserResult(error=persistence_failure(FAILURE_MESSAGE))

        return UserResult(user=user)

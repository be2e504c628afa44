"""
===============================================================================
USE CASE: Create User
===============================================================================

Name:
    Create User Use Case

Business Goal:
    Persistir un usuario nuevo con {name, email}. El id lo asigna el store.

Why (Context / Intención):
    - La unicidad del email NO se chequea acá (sería una carrera entre
      SELECT e INSERT); la impone el UNIQUE de la base y el repositorio la
      clasifica como CONSTRAINT_VIOLATION.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    CreateUserUseCase

Responsibilities:
    - Ejecutar exactamente un create_user en el repositorio.
    - Traducir el fallo clasificado a UserError.

Collaborators:
    - UserRepository.create_user(fields) -> User
    - crosscutting.exceptions.is_constraint_violation
    - user_results: UserResult / email_taken / persistence_failure

-------------------------------------------------------------------------------
INPUTS / OUTPUTS
-------------------------------------------------------------------------------
Inputs:
    - fields: UserFields (ya validado por user_input)

Outputs:
    - UserResult(user=User) | UserResult(error=UserError)

Error Mapping:
    - CONSTRAINT_VIOLATION: email ya existe
    - PERSISTENCE_FAILURE: cualquier otro fallo ("Failed to create user")
===============================================================================
"""

from __future__ import annotations

from ....crosscutting.exceptions import DatabaseError, is_constraint_violation
from ....domain.entities import UserFields
from ....domain.repositories import UserRepository
from .user_results import UserResult, email_taken, persistence_failure

FAILURE_MESSAGE = "Failed to create user"


class CreateUserUseCase:
    """Use Case (Command): alta de usuario."""

    def __init__(self, repository: UserRepository) -> None:
        self._users = repository

    def execute(self, fields: UserFields) -> UserResult:
        try:
            user = self._users.create_user(fields)
        except DatabaseError as exc:
            if is_constraint_violation(exc):
                return UserResult(error=email_taken())
            return UserResult(error=persistence_failure(FAILURE_MESSAGE))

        return UserResult(user=user)

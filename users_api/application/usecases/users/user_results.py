"""
===============================================================================
USER USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Name:
    User Use Case Results

Business Goal:
    Proveer modelos compartidos de resultados y errores para los casos de uso
    de Users, con un contrato estable y explícito para:
      - input inválido (id / payload)
      - violación de unicidad (email)
      - recurso no encontrado
      - fallo genérico de persistencia

Why (Context / Intención):
    - Los use cases devuelven resultados tipados en lugar de lanzar excepciones
      “hacia afuera”; la capa HTTP sólo traduce code -> status.
    - Los mensajes viven acá (no en los routers) para que sean idénticos en
      cualquier adaptador (FastAPI, función serverless, tests).

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    user_results models (module)

Responsibilities:
    - Definir el set cerrado UserErrorCode.
    - Representar UserError (code + message).
    - Representar resultados: UserResult, UserListResult, DeleteUserResult.

Collaborators:
    - domain.entities.User
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ....domain.entities import User


class UserErrorCode(str, Enum):
    """
    Códigos de error de los casos de uso de Users.

      - INVALID_IDENTIFIER: el id del path no es un entero no negativo.
      - INVALID_PAYLOAD: el body no deserializa a {name, email}.
      - CONSTRAINT_VIOLATION: email ya usado por otro usuario.
      - NOT_FOUND: no existe usuario con ese id.
      - PERSISTENCE_FAILURE: cualquier otro fallo del store.
    """

    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"
    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"
    NOT_FOUND = "NOT_FOUND"
    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"


# Mensajes públicos (contrato con clientes existentes).
INVALID_IDENTIFIER_MESSAGE = "Invalid user ID"
INVALID_PAYLOAD_MESSAGE = "Invalid request payload"
EMAIL_TAKEN_MESSAGE = "User with this email already exists"
NOT_FOUND_MESSAGE = "User not found"


@dataclass(frozen=True)
class UserError:
    """Error de caso de uso: categoría estable + mensaje humano."""

    code: UserErrorCode
    message: str


def invalid_identifier() -> UserError:
    return UserError(UserErrorCode.INVALID_IDENTIFIER, INVALID_IDENTIFIER_MESSAGE)


def invalid_payload() -> UserError:
    return UserError(UserErrorCode.INVALID_PAYLOAD, INVALID_PAYLOAD_MESSAGE)


def email_taken() -> UserError:
    return UserError(UserErrorCode.CONSTRAINT_VIOLATION, EMAIL_TAKEN_MESSAGE)


def user_not_found() -> UserError:
    return UserError(UserErrorCode.NOT_FOUND, NOT_FOUND_MESSAGE)


def persistence_failure(message: str) -> UserError:
    return UserError(UserErrorCode.PERSISTENCE_FAILURE, message)


@dataclass
class UserResult:
    """
    Resultado para casos de uso que retornan un único User.

    Contrato:
      - error is None => user presente
      - error != None => user None
    """

    user: User | None = None
    error: UserError | None = None


@dataclass
class UserListResult:
    """Resultado de listado: lista (posiblemente vacía) o error."""

    users: List[User] = field(default_factory=list)
    error: UserError | None = None


@dataclass
class DeleteUserResult:
    """Resultado del delete: deleted=True en éxito."""

    deleted: bool = False
    error: UserError | None = None

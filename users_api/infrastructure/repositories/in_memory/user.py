"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/user.py
============================================================
Class: InMemoryUserRepository

Responsibilities:
  - Almacenar usuarios en memoria (tests / local dev sin Postgres).
  - Replicar el contrato de PostgresUserRepository:
      - id autoincremental asignado por el "store"
      - unicidad de email (CONSTRAINT_VIOLATION)
      - NOT_FOUND en get/update/delete de ids inexistentes
  - Ordering determinístico alineado con Postgres: id ASC.

Collaborators:
  - domain.entities.User, UserFields
  - domain.repositories.UserRepository (contrato a implementar)

Constraints:
  - Thread-safe: acceso protegido por Lock.
  - La comparación de email es exacta (igual que el UNIQUE de Postgres).
============================================================
"""

from __future__ import annotations

from itertools import count
from threading import Lock
from typing import Dict, List

from ....crosscutting.exceptions import PersistenceErrorKind, UserPersistenceError
from ....domain.entities import User, UserFields
from ....domain.repositories import UserRepository


class InMemoryUserRepository(UserRepository):
    """
    Repositorio in-memory, thread-safe, para usuarios.

    Modelo mental:
    - _users es la "tabla" en memoria (id -> User).
    - _ids emula la secuencia IDENTITY: nunca reutiliza ids.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._users: Dict[int, User] = {}
        self._ids = count(1)

    # =========================================================
    # Helpers internos
    # =========================================================
    def _email_taken(self, email: str, *, exclude_id: int | None = None) -> bool:
        return any(
            u.email == email and u.id != exclude_id for u in self._users.values()
        )

    @staticmethod
    def _duplicate_email() -> UserPersistenceError:
        return UserPersistenceError(
            PersistenceErrorKind.CONSTRAINT_VIOLATION,
            "InMemoryUserRepository: duplicate email",
        )

    @staticmethod
    def _not_found(user_id: int) -> UserPersistenceError:
        return UserPersistenceError(
            PersistenceErrorKind.NOT_FOUND,
            f"InMemoryUserRepository: user {user_id} not found",
        )

    # =========================================================
    # API del repositorio
    # =========================================================
    def create_user(self, fields: UserFields) -> User:
        with self._lock:
            if self._email_taken(fields.email):
                raise self._duplicate_email()
            user = User(id=next(self._ids), name=fields.name, email=fields.email)
            self._users[user.id] = user
            return user

    def get_user(self, user_id: int) -> User:
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            raise self._not_found(user_id)
        return user

    def list_users(self) -> List[User]:
        with self._lock:
            return [self._users[k] for k in sorted(self._users)]

    def update_user(self, user_id: int, fields: UserFields) -> User:
        with self._lock:
            current = self._users.get(user_id)
            if current is None:
                raise self._not_found(user_id)
            if self._email_taken(fields.email, exclude_id=user_id):
                raise self._duplicate_email()
            updated = current.with_fields(fields)
            self._users[user_id] = updated
            return updated

    def delete_user(self, user_id: int) -> None:
        with self._lock:
            if self._users.pop(user_id, None) is None:
                raise self._not_found(user_id)

    def ping(self) -> bool:
        return True

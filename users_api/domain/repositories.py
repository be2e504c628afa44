"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define the persistence contract for users (port).
- Keep the application layer independent from PostgreSQL / in-memory storage.

Collaborators
- domain.entities: User, UserFields
- crosscutting.exceptions: UserPersistenceError, PersistenceErrorKind
- infrastructure.repositories: postgres / in_memory implementations

Constraints
- Pure interfaces only: no side effects, no infrastructure imports, no SQL.
- Failures are raised as UserPersistenceError with a PersistenceErrorKind
  already decided by the implementation; callers never inspect driver errors.

Notes
- We use typing.Protocol for structural subtyping ("duck typing").
- Outputs are concrete lists for predictable iteration/serialization.
"""

from typing import List, Protocol

from .entities import User, UserFields


class UserRepository(Protocol):
    """
    R: Interface for user persistence.

    Error contract (UserPersistenceError.kind):
      - CONSTRAINT_VIOLATION: email already used by another user
      - NOT_FOUND: no row with the given id (get/update/delete)
      - FAILURE: anything else
    """

    def create_user(self, fields: UserFields) -> User:
        """R: Insert a user; the store assigns the id."""
        ...

    def get_user(self, user_id: int) -> User:
        """R: Fetch one user by id."""
        ...

    def list_users(self) -> List[User]:
        """R: All users ordered by id (possibly empty)."""
        ...

    def update_user(self, user_id: int, fields: UserFields) -> User:
        """R: Replace name/email of an existing user."""
        ...

    def delete_user(self, user_id: int) -> None:
        """R: Physically delete a user."""
        ...

    def ping(self) -> bool:
        """R: Connectivity check for health endpoints."""
        ...

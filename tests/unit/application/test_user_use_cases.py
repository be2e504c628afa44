"""
Name: User Use Case Tests

Responsibilities:
  - Validate success paths (one repository call each)
  - Validate failure classification per operation
  - Validate predicate priority (constraint before not-found)
"""

from unittest.mock import Mock

import pytest

from users_api.application.usecases.users import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    UserErrorCode,
)
from users_api.crosscutting.exceptions import (
    DatabaseError,
    PersistenceErrorKind,
    UserPersistenceError,
)
from users_api.domain.entities import User, UserFields
from users_api.domain.repositories import UserRepository
from users_api.infrastructure.db.errors import PoolNotInitializedError

pytestmark = pytest.mark.unit

_FIELDS = UserFields(name="Ada", email="ada@example.com")
_USER = User(id=7, name="Ada", email="ada@example.com")


def _failure(kind: PersistenceErrorKind) -> UserPersistenceError:
    return UserPersistenceError(kind, "boom")


def _repo(**methods) -> Mock:
    repo = Mock(spec=UserRepository)
    for name, behaviour in methods.items():
        setattr(repo, name, Mock(**behaviour))
    return repo


# =============================================================================
# Create
# =============================================================================


def test_create_returns_created_user():
    repo = _repo(create_user={"return_value": _USER})

    result = CreateUserUseCase(repo).execute(_FIELDS)

    assert result.error is None
    assert result.user == _USER
    repo.create_user.assert_called_once_with(_FIELDS)


def test_create_duplicate_email_is_constraint_violation():
    repo = _repo(
        create_user={"side_effect": _failure(PersistenceErrorKind.CONSTRAINT_VIOLATION)}
    )

    result = CreateUserUseCase(repo).execute(_FIELDS)

    assert result.user is None
    assert result.error.code == UserErrorCode.CONSTRAINT_VIOLATION
    assert result.error.message == "User with this email already exists"


@pytest.mark.parametrize(
    "exc",
    [
        _failure(PersistenceErrorKind.FAILURE),
        _failure(PersistenceErrorKind.NOT_FOUND),
        PoolNotInitializedError("no pool"),
        DatabaseError("down"),
    ],
)
def test_create_other_failures_collapse_to_persistence_failure(exc):
    repo = _repo(create_user={"side_effect": exc})

    result = CreateUserUseCase(repo).execute(_FIELDS)

    assert result.error.code == UserErrorCode.PERSISTENCE_FAILURE
    assert result.error.message == "Failed to create user"


# =============================================================================
# Get / List
# =============================================================================


def test_get_returns_user():
    repo = _repo(get_user={"return_value": _USER})

    result = GetUserUseCase(repo).execute(7)

    assert result.user == _USER
    repo.get_user.assert_called_once_with(7)


def test_get_unknown_id_is_not_found():
    repo = _repo(get_user={"side_effect": _failure(PersistenceErrorKind.NOT_FOUND)})

    result = GetUserUseCase(repo).execute(7)

    assert result.error.code == UserErrorCode.NOT_FOUND
    assert result.error.message == "User not found"


def test_get_failure_is_persistence_failure():
    repo = _repo(get_user={"side_effect": _failure(PersistenceErrorKind.FAILURE)})

    result = GetUserUseCase(repo).execute(7)

    assert result.error.code == UserErrorCode.PERSISTENCE_FAILURE
    assert result.error.message == "Failed to retrieve user"


def test_list_empty_is_empty_list_not_error():
    repo = _repo(list_users={"return_value": []})

    result = ListUsersUseCase(repo).execute()

    assert result.error is None
    assert result.users == []


def test_list_failure_is_persistence_failure():
    # List only checks "other": even a NOT_FOUND kind collapses.
    repo = _repo(list_users={"side_effect": _failure(PersistenceErrorKind.NOT_FOUND)})

    result = ListUsersUseCase(repo).execute()

    assert result.users == []
    assert result.error.code == UserErrorCode.PERSISTENCE_FAILURE
    assert result.error.message == "Failed to retrieve users"


# =============================================================================
# Update
# =============================================================================


def test_update_returns_updated_user():
    updated = User(id=7, name="Ada L.", email="ada@lovelace.dev")
    repo = _repo(update_user={"return_value": updated})

    result = UpdateUserUseCase(repo).execute(7, _FIELDS)

    assert result.user == updated
    repo.update_user.assert_called_once_with(7, _FIELDS)


@pytest.mark.parametrize(
    "kind, code, message",
    [
        (
            PersistenceErrorKind.CONSTRAINT_VIOLATION,
            UserErrorCode.CONSTRAINT_VIOLATION,
            "User with this email already exists",
        ),
        (PersistenceErrorKind.NOT_FOUND, UserErrorCode.NOT_FOUND, "User not found"),
        (
            PersistenceErrorKind.FAILURE,
            UserErrorCode.PERSISTENCE_FAILURE,
            "Failed to update user",
        ),
    ],
)
def test_update_failure_classification(kind, code, message):
    repo = _repo(update_user={"side_effect": _failure(kind)})

    result = UpdateUserUseCase(repo).execute(7, _FIELDS)

    assert result.error.code == code
    assert result.error.message == message


def test_update_checks_constraint_before_not_found(monkeypatch):
    import users_api.application.usecases.users.update_user as module

    # An error satisfying both predicates must map to the constraint violation.
    monkeypatch.setattr(module, "is_constraint_violation", lambda exc: True)
    monkeypatch.setattr(module, "is_not_found", lambda exc: True)
    repo = _repo(update_user={"side_effect": _failure(PersistenceErrorKind.FAILURE)})

    result = UpdateUserUseCase(repo).execute(7, _FIELDS)

    assert result.error.code == UserErrorCode.CONSTRAINT_VIOLATION


# =============================================================================
# Delete
# =============================================================================


def test_delete_success():
    repo = _repo(delete_user={"return_value": None})

    result = DeleteUserUseCase(repo).execute(7)

    assert result.deleted is True
    assert result.error is None
    repo.delete_user.assert_called_once_with(7)


def test_delete_unknown_id_is_not_found():
    repo = _repo(delete_user={"side_effect": _failure(PersistenceErrorKind.NOT_FOUND)})

    result = DeleteUserUseCase(repo).execute(7)

    assert result.deleted is False
    assert result.error.code == UserErrorCode.NOT_FOUND


def test_delete_failure_is_persistence_failure():
    repo = _repo(delete_user={"side_effect": _failure(PersistenceErrorKind.FAILURE)})

    result = DeleteUserUseCase(repo).execute(7)

    assert result.error.code == UserErrorCode.PERSISTENCE_FAILURE
    assert result.error.message == "Failed to delete user"

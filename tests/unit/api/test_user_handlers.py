"""
Name: User Handler Tests

Responsibilities:
  - Validate the pure (status, body) contract of each handler
  - Ensure invalid input never reaches the repository
  - Ensure update validates the identifier before the body
"""

from unittest.mock import Mock

import pytest

from users_api.application.usecases.users import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from users_api.crosscutting.exceptions import PersistenceErrorKind, UserPersistenceError
from users_api.domain.repositories import UserRepository
from users_api.interfaces.api.http.error_mapping import HttpResult
from users_api.interfaces.api.http.user_handlers import (
    handle_create_user,
    handle_delete_user,
    handle_get_user,
    handle_list_users,
    handle_update_user,
)

pytestmark = pytest.mark.unit

_BODY = b'{"name": "Ada", "email": "ada@example.com"}'


def test_create_returns_201_with_assigned_id(user_repository):
    result = handle_create_user(CreateUserUseCase(user_repository), _BODY)

    assert result == HttpResult(
        status_code=201, body={"id": 1, "name": "Ada", "email": "ada@example.com"}
    )


def test_create_invalid_body_never_calls_repository():
    repo = Mock(spec=UserRepository)

    result = handle_create_user(CreateUserUseCase(repo), b"{oops")

    assert result == HttpResult(400, {"error": "Invalid request payload"})
    repo.create_user.assert_not_called()


def test_create_duplicate_email_returns_400(user_repository):
    use_case = CreateUserUseCase(user_repository)
    handle_create_user(use_case, _BODY)

    result = handle_create_user(use_case, b'{"name": "Other", "email": "ada@example.com"}')

    assert result == HttpResult(400, {"error": "User with this email already exists"})
    assert [u.name for u in user_repository.list_users()] == ["Ada"]


@pytest.mark.parametrize("raw_id", ["abc", "-1", "", "1.5"])
def test_get_invalid_id_never_calls_repository(raw_id):
    repo = Mock(spec=UserRepository)

    result = handle_get_user(GetUserUseCase(repo), raw_id)

    assert result == HttpResult(400, {"error": "Invalid user ID"})
    repo.get_user.assert_not_called()


def test_get_unknown_id_returns_404(user_repository):
    result = handle_get_user(GetUserUseCase(user_repository), "99")

    assert result == HttpResult(404, {"error": "User not found"})


def test_get_persistence_failure_returns_500():
    repo = Mock(spec=UserRepository)
    repo.get_user.side_effect = UserPersistenceError(PersistenceErrorKind.FAILURE, "x")

    result = handle_get_user(GetUserUseCase(repo), "1")

    assert result == HttpResult(500, {"error": "Failed to retrieve user"})


def test_list_empty_returns_200_empty_list(user_repository):
    result = handle_list_users(ListUsersUseCase(user_repository))

    assert result == HttpResult(200, [])


def test_list_failure_returns_500():
    repo = Mock(spec=UserRepository)
    repo.list_users.side_effect = UserPersistenceError(PersistenceErrorKind.FAILURE, "x")

    result = handle_list_users(ListUsersUseCase(repo))

    assert result == HttpResult(500, {"error": "Failed to retrieve users"})


def test_update_validates_identifier_before_body():
    repo = Mock(spec=UserRepository)

    result = handle_update_user(UpdateUserUseCase(repo), "abc", b"{oops")

    assert result == HttpResult(400, {"error": "Invalid user ID"})
    repo.update_user.assert_not_called()


def test_update_invalid_body_never_calls_repository():
    repo = Mock(spec=UserRepository)

    result = handle_update_user(UpdateUserUseCase(repo), "1", b"[]")

    assert result == HttpResult(400, {"error": "Invalid request payload"})
    repo.update_user.assert_not_called()


def test_update_non_json_media_type_never_calls_repository():
    repo = Mock(spec=UserRepository)

    result = handle_update_user(UpdateUserUseCase(repo), "1", _BODY, "text/plain")

    assert result == HttpResult(400, {"error": "Invalid request payload"})
    repo.update_user.assert_not_called()


def test_create_without_body_creates_user_with_empty_fields(user_repository):
    result = handle_create_user(CreateUserUseCase(user_repository), b"", None)

    assert result == HttpResult(201, {"id": 1, "name": "", "email": ""})


def test_update_existing_user_keeps_id(user_repository):
    handle_create_user(CreateUserUseCase(user_repository), _BODY)

    result = handle_update_user(
        UpdateUserUseCase(user_repository),
        "1",
        b'{"name": "Ada L.", "email": "ada@lovelace.dev"}',
    )

    assert result == HttpResult(200, {"id": 1, "name": "Ada L.", "email": "ada@lovelace.dev"})


def test_update_unknown_id_returns_404(user_repository):
    result = handle_update_user(UpdateUserUseCase(user_repository), "5", _BODY)

    assert result == HttpResult(404, {"error": "User not found"})


def test_delete_returns_204_without_body(user_repository):
    handle_create_user(CreateUserUseCase(user_repository), _BODY)

    result = handle_delete_user(DeleteUserUseCase(user_repository), "1")

    assert result == HttpResult(204)
    assert result.body is None


def test_delete_failure_returns_500():
    repo = Mock(spec=UserRepository)
    repo.delete_user.side_effect = UserPersistenceError(PersistenceErrorKind.FAILURE, "x")

    result = handle_delete_user(DeleteUserUseCase(repo), "1")

    assert result == HttpResult(500, {"error": "Failed to delete user"})

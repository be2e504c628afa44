"""
Users use cases (CRUD) + input parsing + shared result models.
"""

from .create_user import CreateUserUseCase
from .delete_user import DeleteUserUseCase
from .get_user import GetUserUseCase
from .list_users import ListUsersUseCase
from .update_user import UpdateUserUseCase
from .user_input import (
    JSON_MEDIA_TYPE,
    MAX_USER_ID,
    UserInputError,
    UserPayload,
    parse_user_fields,
    parse_user_id,
)
from .user_results import (
    DeleteUserResult,
    UserError,
    UserErrorCode,
    UserListResult,
    UserResult,
)

__all__ = [
    "CreateUserUseCase",
    "DeleteUserUseCase",
    "DeleteUserResult",
    "GetUserUseCase",
    "JSON_MEDIA_TYPE",
    "ListUsersUseCase",
    "MAX_USER_ID",
    "UpdateUserUseCase",
    "UserError",
    "UserErrorCode",
    "UserInputError",
    "UserListResult",
    "UserPayload",
    "UserResult",
    "parse_user_fields",
    "parse_user_id",
]

"""
Use Cases Layer (Business Operations)

Structure
---------
usecases/
└── users/   # CRUD over the users resource + input parsing

Usage
-----
    from users_api.application.usecases import CreateUserUseCase, parse_user_id
"""

from .users import (
    CreateUserUseCase,
    DeleteUserResult,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    UserError,
    UserErrorCode,
    UserInputError,
    UserListResult,
    UserResult,
    parse_user_fields,
    parse_user_id,
)

__all__ = [
    "CreateUserUseCase",
    "DeleteUserResult",
    "DeleteUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
    "UserError",
    "UserErrorCode",
    "UserInputError",
    "UserListResult",
    "UserResult",
    "parse_user_fields",
    "parse_user_id",
]

"""
===============================================================================
TARJETA CRC — user_handlers.py (Handlers puros: validar -> ejecutar -> mapear)
===============================================================================

Responsabilidades:
  - Implementar el ciclo de cada request de Users:
        Received -> Validated -> Executed -> Responded
    cualquier fallo salta directo a Responded con el error mapeado.
  - Retornar SIEMPRE un HttpResult (status, body); nunca lanzar.

Reglas:
  - Un input inválido NUNCA llega al repositorio.
  - Update valida primero el id y después el body.
  - Delete exitoso => 204 sin body.

Colaboradores:
  - application.usecases.users (parsers + casos de uso)
  - error_mapping (UserError -> HttpResult)

Notas:
  - Son funciones sin IO propio: el adaptador (FastAPI, función serverless,
    tests) decide cómo materializar el HttpResult.
===============================================================================
"""

from __future__ import annotations

from ....application.usecases.users import (
    JSON_MEDIA_TYPE,
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
    UserInputError,
    UserResult,
    parse_user_fields,
    parse_user_id,
)
from .error_mapping import HttpResult, error_result


def _user_result(result: UserResult, *, success_status: int) -> HttpResult:
    if result.error is not None:
        return error_result(result.error)
    return HttpResult(status_code=success_status, body=result.user.to_dict())


def handle_create_user(
    use_case: CreateUserUseCase,
    raw_body: bytes | None,
    content_type: str | None = JSON_MEDIA_TYPE,
) -> HttpResult:
    try:
        fields = parse_user_fields(raw_body, content_type)
    except UserInputError as exc:
        return error_result(exc.error)

    return _user_result(use_case.execute(fields), success_status=201)


def handle_get_user(use_case: GetUserUseCase, raw_id: str | None) -> HttpResult:
    try:
        user_id = parse_user_id(raw_id)
    except UserInputError as exc:
        return error_result(exc.error)

    return _user_result(use_case.execute(user_id), success_status=200)


def handle_list_users(use_case: ListUsersUseCase) -> HttpResult:
    result = use_case.execute()
    if result.error is not None:
        return error_result(result.error)
    return HttpResult(
        status_code=200, body=[user.to_dict() for user in result.users]
    )


def handle_update_user(
    use_case: UpdateUserUseCase,
    raw_id: str | None,
    raw_body: bytes | None,
    content_type: str | None = JSON_MEDIA_TYPE,
) -> HttpResult:
    try:
        user_id = parse_user_id(raw_id)
        fields = parse_user_fields(raw_body, content_type)
    except UserInputError as exc:
        return error_result(exc.error)

    return _user_result(use_case.execute(user_id, fields), success_status=200)


def handle_delete_user(use_case: DeleteUserUseCase, raw_id: str | None) -> HttpResult:
    try:
        user_id = parse_user_id(raw_id)
    except UserInputError as exc:
        return error_result(exc.error)

    result = use_case.execute(user_id)
    if result.error is not None:
        return error_result(result.error)
    return HttpResult(status_code=204)


__all__ = [
    "handle_create_user",
    "handle_delete_user",
    "handle_get_user",
    "handle_list_users",
    "handle_update_user",
]

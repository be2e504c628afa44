"""
===============================================================================
TARJETA CRC — users_api/interfaces/api/http/routers/users.py
===============================================================================

Class/Module:
    Users Router

Responsibilities:
    - Exponer GET/POST /users y GET/PUT/DELETE /users/{user_id}.
    - `/users/` (id vacío) responde 400 "Invalid user ID" en vez de redirigir.
    - Entregar path param y body CRUDOS al handler (la validación es del core).
    - Materializar HttpResult en JSONResponse / Response(204).

Collaborators:
    - users_api.container (factories DI)
    - user_handlers (ciclo validar -> ejecutar -> mapear)
    - schemas.users.UserRes (OpenAPI)

Notas:
    - Los casos de uso son sync (psycopg bloqueante): se corren en threadpool.
===============================================================================
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from .....application.usecases import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from .....application.usecases.users.user_results import invalid_identifier
from .....container import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_get_user_use_case,
    get_list_users_use_case,
    get_update_user_use_case,
)
from ..error_mapping import HttpResult, error_result
from ..schemas.users import UserRes
from ..user_handlers import (
    handle_create_user,
    handle_delete_user,
    handle_get_user,
    handle_list_users,
    handle_update_user,
)

router = APIRouter(prefix="/users", tags=["users"])


def _to_response(result: HttpResult) -> Response:
    """HttpResult -> respuesta Starlette (204 sin body)."""
    if result.status_code == 204:
        return Response(status_code=204)
    return JSONResponse(status_code=result.status_code, content=result.body)


@router.get("", response_model=List[UserRes])
async def list_users(
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
) -> Response:
    return _to_response(await run_in_threadpool(handle_list_users, use_case))


@router.post("", status_code=201, response_model=UserRes)
async def create_user(
    request: Request,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> Response:
    raw_body = await request.body()
    return _to_response(
        await run_in_threadpool(
            handle_create_user, use_case, raw_body, request.headers.get("content-type")
        )
    )


@router.get("/{user_id}", response_model=UserRes)
async def get_user(
    user_id: str,
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
) -> Response:
    return _to_response(await run_in_threadpool(handle_get_user, use_case, user_id))


@router.put("/{user_id}", response_model=UserRes)
async def update_user(
    user_id: str,
    request: Request,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
) -> Response:
    raw_body = await request.body()
    return _to_response(
        await run_in_threadpool(
            handle_update_user,
            use_case,
            user_id,
            raw_body,
            request.headers.get("content-type"),
        )
    )


@router.delete("/{user_id}", status_code=204, response_class=Response)
async def delete_user(
    user_id: str,
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
) -> Response:
    return _to_response(
        await run_in_threadpool(handle_delete_user, use_case, user_id)
    )


# `/users/` es un id vacío; sin esta ruta redirect_slashes respondería 307.
@router.api_route("/", methods=["GET", "PUT", "DELETE"], include_in_schema=False)
async def empty_user_id() -> Response:
    return _to_response(error_result(invalid_identifier()))

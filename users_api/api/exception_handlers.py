"""
===============================================================================
TARJETA CRC — users_api/api/exception_handlers.py (Manejo Centralizado de Excepciones)
===============================================================================

Responsabilidades:
  - Renderizar errores del framework (ruta inexistente, método no permitido)
    con el mismo shape {"error": ...} que los handlers de Users.
  - Fail-safe: cualquier excepción no tipada -> 500 "Internal server error".
  - Centralizar logging de errores con request_id + error_id.

Colaboradores:
  - crosscutting.error_responses: app_exception_handler, error_content
  - crosscutting.exceptions: UsersApiError
  - crosscutting.logger
===============================================================================
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..crosscutting.error_responses import (
    INTERNAL_ERROR_MESSAGE,
    app_exception_handler,
    error_content,
)
from ..crosscutting.exceptions import UsersApiError
from ..crosscutting.logger import logger


def _request_id_from(request: Request) -> str | None:
    return getattr(getattr(request, "state", None), "request_id", None)


def _internal_error_response() -> JSONResponse:
    return JSONResponse(status_code=500, content=error_content(INTERNAL_ERROR_MESSAGE))


async def users_api_error_handler(request: Request, exc: UsersApiError) -> JSONResponse:
    """Errores tipados que escaparon a un caso de uso: 500 genérico."""
    logger.error(
        "Error de servicio",
        extra={
            "code": exc.error_code,
            "error_id": exc.error_id,
            "error_message": exc.message,
            "request_id": _request_id_from(request),
        },
    )
    return _internal_error_response()


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handler fallback para excepciones no tipadas.

    - Log completo (stacktrace).
    - Respuesta genérica (no filtra internos).
    """
    logger.error(
        "Excepción no controlada",
        exc_info=exc,
        extra={"request_id": _request_id_from(request), "error": str(exc)},
    )
    return _internal_error_response()


def register_exception_handlers(app) -> None:
    """
    Registra handlers en la app FastAPI.

    Exception genérica se registra al final como fallback.
    """
    app.add_exception_handler(StarletteHTTPException, app_exception_handler)
    app.add_exception_handler(UsersApiError, users_api_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["register_exception_handlers"]

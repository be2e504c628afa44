"""
===============================================================================
MÓDULO: Respuestas de error estándar ({"error": "<mensaje>"})
===============================================================================

Objetivo
--------
Uniformar TODOS los errores HTTP con un único shape:
    {"error": "<mensaje legible>"}
Sin código interno, sin stacktrace, sin identificadores de infraestructura.

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  ErrorBody + handlers

Responsabilidades:
  - Definir el modelo de error (ErrorBody) para respuestas y OpenAPI
  - Proveer handlers (FastAPI/Starlette) que rendericen el shape estándar

Colaboradores:
  - api/exception_handlers.py (registro en la app)
  - interfaces/api/http/error_mapping.py (errores de use cases)
===============================================================================
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

INTERNAL_ERROR_MESSAGE = "Internal server error"


class ErrorBody(BaseModel):
    """Cuerpo de error único de la API."""

    error: str


def error_content(message: str) -> dict[str, str]:
    return ErrorBody(error=message).model_dump()


OPENAPI_ERROR_RESPONSES = {
    400: {"description": "Invalid identifier, payload or duplicate email", "model": ErrorBody},
    404: {"description": "User not found", "model": ErrorBody},
    500: {"description": "Persistence failure", "model": ErrorBody},
}


# ---------------------------------------------------------------------------
# Handlers FastAPI
# ---------------------------------------------------------------------------
async def app_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handler para HTTPException del framework
    (rutas inexistentes, método no permitido).
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=error_content(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


"""
===============================================================================
TARJETA CRC — router.py (Router raíz / Composición)
===============================================================================

Responsabilidades:
  - Definir el APIRouter raíz que se incluye en FastAPI (app.include_router).
  - Centralizar responses {"error": ...} para OpenAPI.
  - Componer routers por feature.

Colaboradores:
  - crosscutting.error_responses.OPENAPI_ERROR_RESPONSES
  - routers.users

Notas:
  - Se incluye desde users_api/api/main.py SIN prefijo de versión.
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter

from ....crosscutting.error_responses import OPENAPI_ERROR_RESPONSES
from .routers.users import router as users_router


def build_router() -> APIRouter:
    """Construye el router raíz (factory: testeable, sin side-effects al importar)."""
    api_router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)
    api_router.include_router(users_router)
    return api_router


router = build_router()

__all__ = ["router", "build_router"]

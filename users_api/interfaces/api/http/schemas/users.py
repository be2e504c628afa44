"""
===============================================================================
TARJETA CRC — schemas/users.py
===============================================================================

Módulo:
    Schemas HTTP para Users

Responsabilidades:
    - Documentar en OpenAPI la representación pública de un usuario.

Notas:
    - El body de entrada NO se declara acá: el router lee el body crudo y lo
      parsea application.usecases.users.user_input (errores propios).
===============================================================================
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class UserRes(BaseModel):
    """Representación pública de un usuario."""

    id: int = Field(..., description="Identificador asignado por el store")
    name: str
    email: str

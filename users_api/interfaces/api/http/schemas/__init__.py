"""
===============================================================================
TARJETA CRC — schemas/__init__.py
===============================================================================

Módulo:
    Paquete de Schemas HTTP (DTOs Pydantic)

Reglas:
    - Schemas NO importan infraestructura.
    - Schemas NO ejecutan casos de uso.
    - Solo tipos de salida para OpenAPI; el input se parsea en application.
===============================================================================
"""

from .users import UserRes

__all__ = ["UserRes"]

"""
===============================================================================
TARJETA CRC — error_mapping.py (UserError -> HTTP)
===============================================================================

Responsabilidades:
  - Traducir UserErrorCode a status HTTP.
  - Construir el valor (status, body) de error con el shape {"error": ...}.
  - Mantener el dominio libre de HTTP.

Reglas:
  - NUNCA se propagan excepciones de infraestructura hacia la API.
  - El mensaje del body es exactamente UserError.message.

Colaboradores:
  - application.usecases.users (UserError, UserErrorCode)
  - crosscutting.error_responses.error_content
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ....application.usecases.users import UserError, UserErrorCode
from ....crosscutting.error_responses import error_content

_STATUS_BY_CODE: dict[UserErrorCode, int] = {
    UserErrorCode.INVALID_IDENTIFIER: 400,
    UserErrorCode.INVALID_PAYLOAD: 400,
    UserErrorCode.CONSTRAINT_VIOLATION: 400,
    UserErrorCode.NOT_FOUND: 404,
    UserErrorCode.PERSISTENCE_FAILURE: 500,
}


@dataclass(frozen=True)
class HttpResult:
    """
    Resultado de un handler: status + body JSON-serializable.

    body=None significa "sin contenido" (204).
    """

    status_code: int
    body: Any = None


def status_for(code: UserErrorCode) -> int:
    return _STATUS_BY_CODE[code]


def error_result(error: UserError) -> HttpResult:
    """Traduce UserError -> HttpResult con body {"error": message}."""
    return HttpResult(
        status_code=status_for(error.code),
        body=error_content(error.message),
    )


__all__ = ["HttpResult", "error_result", "status_for"]

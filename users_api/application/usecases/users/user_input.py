"""
===============================================================================
USER INPUT PARSING (Validator)
===============================================================================

Business Goal:
    Convertir input crudo (path param / body) en input tipado ANTES de tocar
    la persistencia. Si falla, se corta acá con un UserError de cliente.

Rules:
    - id: entero no negativo, sólo dígitos ASCII, dentro del rango BIGINT.
      "", "abc", "-1", "1.5", " 7", "99999999999999999999" -> INVALID_IDENTIFIER
    - body: objeto JSON; name/email, si vienen, deben ser strings.
      Campos ausentes o null quedan en "" y los desconocidos se ignoran.
      Body vacío o `null` equivalen a {} (binder permisivo).
      JSON inválido, no-objeto o tipos incorrectos -> INVALID_PAYLOAD
    - Un body no vacío exige Content-Type JSON -> si no, INVALID_PAYLOAD
    - NO se valida formato de email ni strings vacíos (contrato permisivo).

Side effects:
    Ninguno. Funciones puras.
===============================================================================
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    field_validator,
    model_validator,
)

from ....domain.entities import UserFields
from .user_results import UserError, invalid_identifier, invalid_payload

# Rango de la columna `users.id` (BIGINT).
MAX_USER_ID = 2**63 - 1

# Cota de longitud antes de int(): evita el límite de conversión de CPython.
_MAX_ID_DIGITS = len(str(MAX_USER_ID))

_DIGITS = re.compile(r"[0-9]+")

JSON_MEDIA_TYPE = "application/json"


class UserInputError(ValueError):
    """Input de cliente rechazado; transporta el UserError a responder."""

    def __init__(self, error: UserError):
        super().__init__(error.message)
        self.error = error


class UserPayload(BaseModel):
    """Shape del body para create/update (UserRequest)."""

    model_config = ConfigDict(strict=True, extra="ignore")

    name: str = ""
    email: str = ""

    @model_validator(mode="before")
    @classmethod
    def null_body_as_empty(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("name", "email", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_fields(self) -> UserFields:
        return UserFields(name=self.name, email=self.email)


def parse_user_id(raw: str | None) -> int:
    """Parsea el id del path. Lanza UserInputError(INVALID_IDENTIFIER)."""
    if raw is None or not _DIGITS.fullmatch(raw):
        raise UserInputError(invalid_identifier())

    # "007" sigue siendo válido: los ceros a la izquierda no cuentan.
    digits = raw.lstrip("0") or "0"
    if len(digits) > _MAX_ID_DIGITS:
        raise UserInputError(invalid_identifier())

    value = int(digits)
    if value > MAX_USER_ID:
        raise UserInputError(invalid_identifier())
    return value


def _is_json_media_type(content_type: str | None) -> bool:
    if not content_type:
        return False
    return content_type.split(";", 1)[0].strip().lower() == JSON_MEDIA_TYPE


def parse_user_fields(
    raw: bytes | str | None, content_type: str | None = JSON_MEDIA_TYPE
) -> UserFields:
    """
    Deserializa el body JSON. Lanza UserInputError(INVALID_PAYLOAD).

    Sin body no hay nada que decodificar: se devuelven campos vacíos sin
    mirar el Content-Type.
    """
    if not raw:
        return UserFields(name="", email="")

    if not _is_json_media_type(content_type):
        raise UserInputError(invalid_payload())

    try:
        payload = UserPayload.model_validate_json(raw)
    except ValidationError as exc:
        raise UserInputError(invalid_payload()) from exc

    return payload.to_fields()

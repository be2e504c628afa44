"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Entidades:
  - User: registro persistido (id asignado por el store, inmutable).
  - UserFields: campos editables (name, email) que viajan en create/update.

Reglas:
  - El dominio NO valida formato de email ni longitudes; la unicidad del
    email la impone la base de datos (uq_users_email).
  - Sin timestamps ni soft-delete: el delete es físico.
===============================================================================
"""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class UserFields:
    """Campos editables de un usuario (sin id)."""

    name: str
    email: str


@dataclass(frozen=True)
class User:
    """Usuario persistido."""

    id: int
    name: str
    email: str

    def to_dict(self) -> dict[str, object]:
        return asdict(self)

    def with_fields(self, fields: UserFields) -> "User":
        """Copia con name/email reemplazados; el id se conserva."""
        return User(id=self.id, name=fields.name, email=fields.email)

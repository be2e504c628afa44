"""
============================================================
TARJETA CRC (Class / Responsibilities / Collaborators)
============================================================
Class: 001_users (Alembic Migration)

Responsibilities:
  - Crear la tabla `users` (id autoincremental, name, email).
  - Imponer la unicidad del email en la base (uq_users_email): es la única
    fuente de verdad para "email duplicado".

Collaborators:
  - PostgreSQL 13+ (identity columns)
  - Alembic (framework de migraciones)
  - PostgresUserRepository (usa este esquema como contrato)

Policy:
  - Migración BASELINE.
  - Convención de nombres:
      pk_<tabla>            - Primary keys
      uq_<tabla>_<col>      - Unique constraints
============================================================
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001_users"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.BigInteger,
            sa.Identity(always=False),
            nullable=False,
        ),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("email", sa.Text, nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )


def downgrade() -> None:
    op.drop_table("users")

"""Create translations table.

Revision ID: a1c2e3f4b5d6
Revises:
Create Date: 2026-10-17

One row per distinct (text, locale) pair keyed by the MD5 cache key.
Rows are immortal: no eviction or TTL at this tier.
"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa
from alembic import op

revision: str = "a1c2e3f4b5d6"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "translations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("cache_key", sa.String(32), nullable=False),
        sa.Column("translated_text", sa.String(64), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_translations_cache_key"),
        "translations",
        ["cache_key"],
        unique=True,
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_translations_cache_key"), table_name="translations")
    op.drop_table("translations")

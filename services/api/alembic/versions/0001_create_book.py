"""create book table

Revision ID: 0001_create_book
Revises:
Create Date: 2026-10-19 09:30:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001_create_book"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    if bind.dialect.supports_sequences:
        op.execute(
            sa.schema.CreateSequence(sa.Sequence("sequence_generator", start=1, increment=1))
        )

    op.create_table(
        "book",
        sa.Column(
            "id",
            sa.BigInteger().with_variant(sa.Integer(), "sqlite"),
            sa.Sequence("sequence_generator"),
            nullable=False,
        ),
        sa.Column("title", sa.String(length=20), nullable=False),
        sa.Column("description", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_book")),
    )


def downgrade() -> None:
    op.drop_table("book")

    bind = op.get_bind()
    if bind.dialect.supports_sequences:
        op.execute(sa.schema.DropSequence(sa.Sequence("sequence_generator")))

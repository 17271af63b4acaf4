"""Create monitor table

Revision ID: 001
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel

from alembic import op
from src.monitor_service.core.config import get_settings

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    schema = get_settings().database_schema

    op.execute(sa.schema.CreateSchema(schema, if_not_exists=True))
    op.create_table(
        "apichecks",
        sa.Column("id", sqlmodel.sql.sqltypes.AutoString(length=36), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=128), nullable=False),
        sa.Column(
            "monitor_id", sqlmodel.sql.sqltypes.AutoString(), nullable=False, server_default=""
        ),
        sa.Column("org_id", sqlmodel.sql.sqltypes.AutoString(), nullable=False, server_default=""),
        sa.Column("tenant", sqlmodel.sql.sqltypes.AutoString(), nullable=False, server_default=""),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        schema=schema,
    )
    op.create_index("ix_hawkeye_apichecks_org_id", "apichecks", ["org_id"], schema=schema)
    op.create_index("ix_hawkeye_apichecks_tenant", "apichecks", ["tenant"], schema=schema)


def downgrade() -> None:
    schema = get_settings().database_schema

    op.drop_index("ix_hawkeye_apichecks_tenant", table_name="apichecks", schema=schema)
    op.drop_index("ix_hawkeye_apichecks_org_id", table_name="apichecks", schema=schema)
    op.drop_table("apichecks", schema=schema)

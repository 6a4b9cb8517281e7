"""create orders table

Revision ID: 5e2c1a9b7d40
Revises:
Create Date: 2026-10-18 09:12:41.530318

Idempotent: databases where Base.metadata.create_all() already built the
table are left alone.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5e2c1a9b7d40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


ORDER_STATUS = sa.Enum(
    "QUOTE", "APPROVED", "IN_PRODUCTION", "QUALITY_CHECK", "READY", "COMPLETED", "CANCELLED",
    name="orderstatus",
)
PRIORITY = sa.Enum("STANDARD", "RUSH", "EXPRESS", name="priority")
COMPLEXITY = sa.Enum("SIMPLE", "MEDIUM", "COMPLEX", name="complexity")


def _table_exists(table_name):
    bind = op.get_bind()
    insp = sa.inspect(bind)
    return table_name in insp.get_table_names()


def upgrade() -> None:
    if _table_exists("orders"):
        return

    op.create_table(
        "orders",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("order_number", sa.String(), nullable=False),
        sa.Column("customer_name", sa.String(), nullable=True),
        sa.Column("customer_email", sa.String(), nullable=True),
        sa.Column("status", ORDER_STATUS, nullable=False),
        sa.Column("priority", PRIORITY, nullable=False),
        sa.Column("artwork_description", sa.Text(), nullable=True),
        sa.Column("image_width", sa.Float(), nullable=True),
        sa.Column("image_height", sa.Float(), nullable=True),
        sa.Column("mat_width", sa.Float(), nullable=True),
        sa.Column("mat_height", sa.Float(), nullable=True),
        sa.Column("frame_style", sa.String(), nullable=True),
        sa.Column("mat_type", sa.String(), nullable=True),
        sa.Column("glass_type", sa.String(), nullable=True),
        sa.Column("backing_type", sa.String(), nullable=True),
        sa.Column("complexity", COMPLEXITY, nullable=False),
        sa.Column("special_instructions", sa.Text(), nullable=True),
        sa.Column("base_price", sa.Float(), nullable=True),
        sa.Column("frame_price", sa.Float(), nullable=True),
        sa.Column("mat_price", sa.Float(), nullable=True),
        sa.Column("glass_price", sa.Float(), nullable=True),
        sa.Column("backing_price", sa.Float(), nullable=True),
        sa.Column("labor_price", sa.Float(), nullable=True),
        sa.Column("rush_fee", sa.Float(), nullable=True),
        sa.Column("subtotal", sa.Float(), nullable=True),
        sa.Column("tax", sa.Float(), nullable=True),
        sa.Column("total", sa.Float(), nullable=True),
        sa.Column("estimated_completion", sa.Date(), nullable=True),
        sa.Column("last_status_update", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("order_number"),
    )
    op.create_index("ix_orders_id", "orders", ["id"])


def downgrade() -> None:
    if _table_exists("orders"):
        op.drop_index("ix_orders_id", table_name="orders")
        op.drop_table("orders")
    bind = op.get_bind()
    if bind.dialect.name == "postgresql":
        for enum_type in (ORDER_STATUS, PRIORITY, COMPLEXITY):
            enum_type.drop(bind, checkfirst=True)

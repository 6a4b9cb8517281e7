"""add payments

Revision ID: 9b41d7c3e2a8
Revises: 5e2c1a9b7d40
Create Date: 2026-10-18 14:03:17.220914

Payment tracking on orders (amount_paid, payment_status), status-change
notes (internal_notes) and the payments ledger table. Columns and table are
only added when missing, so a database built by create_all() upgrades cleanly.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '9b41d7c3e2a8'
down_revision: Union[str, None] = '5e2c1a9b7d40'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


PAYMENT_STATUS = sa.Enum("UNPAID", "PARTIAL", "PAID", "REFUNDED", name="paymentstatus")

ORDER_COLUMNS = [
    ("amount_paid", sa.Float(), sa.text("0.0")),
    ("payment_status", PAYMENT_STATUS, sa.text("'UNPAID'")),
    ("internal_notes", sa.Text(), None),
]


def _table_exists(table_name):
    return table_name in sa.inspect(op.get_bind()).get_table_names()


def _column_exists(table_name, column_name):
    columns = sa.inspect(op.get_bind()).get_columns(table_name)
    return column_name in [c["name"] for c in columns]


def upgrade() -> None:
    bind = op.get_bind()
    if bind.dialect.name == "postgresql":
        PAYMENT_STATUS.create(bind, checkfirst=True)

    for name, col_type, default in ORDER_COLUMNS:
        if not _column_exists("orders", name):
            op.add_column("orders", sa.Column(name, col_type, nullable=True,
                                              server_default=default))

    if not _table_exists("payments"):
        op.create_table(
            "payments",
            sa.Column("id", sa.Integer(), nullable=False),
            sa.Column("order_id", sa.Integer(), nullable=False),
            sa.Column("amount", sa.Float(), nullable=False),
            sa.Column("method", sa.String(), nullable=False),
            sa.Column("status", sa.String(), nullable=True),
            sa.Column("transaction_id", sa.String(), nullable=True),
            sa.Column("notes", sa.Text(), nullable=True),
            sa.Column("created_at", sa.DateTime(), nullable=True),
            sa.ForeignKeyConstraint(["order_id"], ["orders.id"]),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index("ix_payments_id", "payments", ["id"])


def downgrade() -> None:
    if _table_exists("payments"):
        op.drop_index("ix_payments_id", table_name="payments")
        op.drop_table("payments")

    for name, _, _ in reversed(ORDER_COLUMNS):
        if _column_exists("orders", name):
            with op.batch_alter_table("orders") as batch_op:
                batch_op.drop_column(name)

    bind = op.get_bind()
    if bind.dialect.name == "postgresql":
        PAYMENT_STATUS.drop(bind, checkfirst=True)

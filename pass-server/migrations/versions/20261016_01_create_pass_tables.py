"""create transactions, passes and staff tables

Revision ID: 5c1e2a9d7b30
Revises:
Create Date: 2026-10-16 09:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "5c1e2a9d7b30"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "transactions",
        sa.Column("seq", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("payer_name", sa.String(length=200), nullable=False),
        sa.Column("payer_email", sa.String(length=200)),
        sa.Column("payer_phone", sa.String(length=50)),
        sa.Column("total_amount_cents", sa.Integer(), nullable=False),
        sa.Column("slip_filename", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_transactions_id", "transactions", ["id"], unique=True)

    op.create_table(
        "passes",
        sa.Column("seq", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("transaction_id", sa.String(length=36), sa.ForeignKey("transactions.id"), nullable=False),
        sa.Column("staff_id", sa.String(length=36), nullable=False),
        sa.Column("customer_name", sa.String(length=200), nullable=False),
        sa.Column("pass_type", sa.String(length=20), nullable=False),
        sa.Column("id_number", sa.String(length=50)),
        sa.Column("plate_number", sa.String(length=50)),
        sa.Column("valid_date", sa.Date(), nullable=False),
        sa.Column("pass_number", sa.String(length=50), nullable=False),
        sa.Column("amount_cents", sa.Integer(), nullable=False),
        sa.Column("qr_code", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_passes_id", "passes", ["id"], unique=True)
    op.create_index("ix_passes_transaction_id", "passes", ["transaction_id"])
    op.create_index("ix_passes_staff_id", "passes", ["staff_id"])
    op.create_index("ix_passes_pass_number", "passes", ["pass_number"], unique=True)
    op.create_index("ix_passes_created_at", "passes", ["created_at"])

    op.create_table(
        "staff",
        sa.Column("seq", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("full_name", sa.String(length=200), nullable=False),
        sa.Column("designation", sa.String(length=100), nullable=False),
        sa.Column("department", sa.String(length=100), nullable=False),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_staff_id", "staff", ["id"], unique=True)
    op.create_index("ix_staff_username", "staff", ["username"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_staff_username", table_name="staff")
    op.drop_index("ix_staff_id", table_name="staff")
    op.drop_table("staff")

    op.drop_index("ix_passes_created_at", table_name="passes")
    op.drop_index("ix_passes_pass_number", table_name="passes")
    op.drop_index("ix_passes_staff_id", table_name="passes")
    op.drop_index("ix_passes_transaction_id", table_name="passes")
    op.drop_index("ix_passes_id", table_name="passes")
    op.drop_table("passes")

    op.drop_index("ix_transactions_id", table_name="transactions")
    op.drop_table("transactions")

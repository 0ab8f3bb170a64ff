"""create ledger, period and cash tables

Revision ID: 3a61c0e2b7d4
Revises:
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3a61c0e2b7d4"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "account",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("number", sa.String(length=20), nullable=False, unique=True),
        sa.Column("label", sa.String(), nullable=False),
    )
    op.create_table(
        "fiscal_year",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("label", sa.String(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("previous_fiscal_year_id", sa.Integer(), sa.ForeignKey("fiscal_year.id"), nullable=True),
    )
    op.create_table(
        "period",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "fiscal_year_id",
            sa.Integer(),
            sa.ForeignKey("fiscal_year.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("number", sa.Integer(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
    )
    op.create_index("idx_period_dates", "period", ["start_date", "end_date"])
    op.create_table(
        "transaction_type",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("text", sa.String(), nullable=False),
        sa.Column("type", sa.String(), nullable=True),
    )
    op.create_table(
        "general_ledger",
        sa.Column("uuid", sa.String(length=36), primary_key=True),
        sa.Column("record_uuid", sa.String(length=36), nullable=False),
        sa.Column("trans_id", sa.String(length=100), nullable=False),
        sa.Column("trans_date", sa.Date(), nullable=False),
        sa.Column("period_id", sa.Integer(), sa.ForeignKey("period.id"), nullable=True),
        sa.Column("account_id", sa.Integer(), sa.ForeignKey("account.id"), nullable=False),
        sa.Column("debit", sa.Float(), nullable=True),
        sa.Column("credit", sa.Float(), nullable=True),
        sa.Column("debit_equiv", sa.Float(), nullable=True),
        sa.Column("credit_equiv", sa.Float(), nullable=True),
        sa.Column("currency_id", sa.Integer(), nullable=True),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("comment", sa.String(), nullable=True),
        sa.Column("origin_id", sa.Integer(), sa.ForeignKey("transaction_type.id"), nullable=True),
    )
    op.create_index("idx_general_ledger_account_date", "general_ledger", ["account_id", "trans_date"])
    op.create_index("idx_general_ledger_trans_id", "general_ledger", ["trans_id"])
    op.create_table(
        "voucher",
        sa.Column("uuid", sa.String(length=36), primary_key=True),
        sa.Column("type_id", sa.Integer(), nullable=True),
        sa.Column("reference_uuid", sa.String(length=36), nullable=True),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("amount", sa.Float(), nullable=True),
        sa.Column("description", sa.String(), nullable=True),
    )
    op.create_table(
        "project",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("abbr", sa.String(length=12), nullable=False),
    )
    op.create_table(
        "patient",
        sa.Column("uuid", sa.String(length=36), primary_key=True),
        sa.Column("debtor_uuid", sa.String(length=36), nullable=False, unique=True),
        sa.Column("display_name", sa.String(), nullable=False),
    )
    op.create_table(
        "service",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
    )
    op.create_table(
        "invoice",
        sa.Column("uuid", sa.String(length=36), primary_key=True),
        sa.Column("service_id", sa.Integer(), sa.ForeignKey("service.id"), nullable=True),
        sa.Column("cost", sa.Float(), nullable=True),
        sa.Column("date", sa.Date(), nullable=True),
    )
    op.create_table(
        "cash",
        sa.Column("uuid", sa.String(length=36), primary_key=True),
        sa.Column("project_id", sa.Integer(), sa.ForeignKey("project.id"), nullable=False),
        sa.Column("reference", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("debtor_uuid", sa.String(length=36), nullable=False),
        sa.Column("amount", sa.Float(), nullable=True),
        sa.Column("currency_id", sa.Integer(), nullable=True),
        sa.Column("is_caution", sa.Boolean(), nullable=True),
        sa.Column("reversed", sa.Boolean(), nullable=True),
    )
    op.create_index("idx_cash_date", "cash", ["date"])
    op.create_table(
        "cash_item",
        sa.Column("uuid", sa.String(length=36), primary_key=True),
        sa.Column(
            "cash_uuid",
            sa.String(length=36),
            sa.ForeignKey("cash.uuid", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("invoice_uuid", sa.String(length=36), sa.ForeignKey("invoice.uuid"), nullable=False),
        sa.Column("amount", sa.Float(), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("cash_item")
    op.drop_index("idx_cash_date", table_name="cash")
    op.drop_table("cash")
    op.drop_table("invoice")
    op.drop_table("service")
    op.drop_table("patient")
    op.drop_table("project")
    op.drop_table("voucher")
    op.drop_index("idx_general_ledger_trans_id", table_name="general_ledger")
    op.drop_index("idx_general_ledger_account_date", table_name="general_ledger")
    op.drop_table("general_ledger")
    op.drop_table("transaction_type")
    op.drop_index("idx_period_dates", table_name="period")
    op.drop_table("period")
    op.drop_table("fiscal_year")
    op.drop_table("account")

"""initial schema: ledgers, vouchers, entries, inventory

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

LEDGER_GROUPS = (
    "CAPITAL_ACCOUNT", "CURRENT_ASSETS", "CURRENT_LIABILITIES",
    "DIRECT_EXPENSES", "DIRECT_INCOMES", "FIXED_ASSETS",
    "INDIRECT_EXPENSES", "INDIRECT_INCOMES", "INVESTMENTS", "LOANS",
    "BANK_ACCOUNTS", "CASH_IN_HAND", "SUNDRY_DEBTORS", "SUNDRY_CREDITORS",
    "DUTIES_AND_TAXES", "PROVISIONS",
)
VOUCHER_TYPES = (
    "PAYMENT", "RECEIPT", "CONTRA", "JOURNAL",
    "SALES", "PURCHASE", "DEBIT_NOTE", "CREDIT_NOTE",
)


def _trade_table(name: str, party_column: str) -> None:
    op.create_table(
        name,
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("owner_id", sa.String(64), nullable=False),
        sa.Column("invoice_no", sa.String(30), nullable=False),
        sa.Column(party_column, sa.String(100), nullable=False),
        sa.Column("product_code", sa.String(20), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("rate", sa.Numeric(19, 4), nullable=False),
        sa.Column("total_value", sa.Numeric(19, 4), nullable=False),
        sa.Column("gst_amount", sa.Numeric(19, 4), nullable=False),
        sa.Column("grand_total", sa.Numeric(19, 4), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index(f"ix_{name}_owner_id", name, ["owner_id"])
    op.create_index(f"ix_{name}_product_code", name, ["product_code"])
    op.create_index(f"ix_{name}_date", name, ["date"])


def upgrade() -> None:
    op.create_table(
        "ledgers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("owner_id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column(
            "group",
            sa.Enum(*LEDGER_GROUPS, name="ledger_group_enum", create_constraint=True),
            nullable=False,
        ),
        sa.Column("opening_balance", sa.Numeric(19, 4), nullable=False),
        sa.Column("current_balance", sa.Numeric(19, 4), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("owner_id", "name", name="uq_ledgers_owner_name"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_ledgers_owner_id", "ledgers", ["owner_id"])

    op.create_table(
        "vouchers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("owner_id", sa.String(64), nullable=False),
        sa.Column(
            "voucher_type",
            sa.Enum(*VOUCHER_TYPES, name="voucher_type_enum", create_constraint=True),
            nullable=False,
        ),
        sa.Column("voucher_number", sa.String(30), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("reference_number", sa.String(100), nullable=True),
        sa.Column("narration", sa.Text(), nullable=False),
        sa.Column("party_name", sa.String(100), nullable=True),
        sa.Column("total_debit", sa.Numeric(19, 4), nullable=False),
        sa.Column("total_credit", sa.Numeric(19, 4), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint(
            "owner_id", "voucher_number", name="uq_vouchers_owner_number"
        ),
    )
    op.create_index("ix_vouchers_owner_id", "vouchers", ["owner_id"])
    op.create_index("ix_vouchers_voucher_type", "vouchers", ["voucher_type"])
    op.create_index("ix_vouchers_date", "vouchers", ["date"])

    op.create_table(
        "ledger_entries",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "voucher_id",
            sa.Integer(),
            sa.ForeignKey("vouchers.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("ledger_id", sa.Integer(), nullable=False),
        sa.Column("ledger_name", sa.String(100), nullable=False),
        sa.Column("amount", sa.Numeric(19, 4), nullable=False),
        sa.Column(
            "entry_type",
            sa.Enum("DEBIT", "CREDIT", name="entry_type_enum"),
            nullable=False,
        ),
        sa.Column("description", sa.String(255), nullable=True),
    )
    op.create_index("ix_ledger_entries_voucher_id", "ledger_entries", ["voucher_id"])
    op.create_index("ix_ledger_entries_ledger_id", "ledger_entries", ["ledger_id"])

    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("owner_id", sa.String(64), nullable=False),
        sa.Column("product_code", sa.String(20), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("brand", sa.String(100), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("purchase_rate", sa.Numeric(19, 4), nullable=False),
        sa.Column("selling_rate", sa.Numeric(19, 4), nullable=False),
        sa.Column("gst_percent", sa.Numeric(5, 2), nullable=False),
        sa.Column("opening_stock", sa.Integer(), nullable=False),
        sa.Column("reorder_level", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint(
            "owner_id", "product_code", name="uq_products_owner_code"
        ),
    )
    op.create_index("ix_products_owner_id", "products", ["owner_id"])

    _trade_table("sales", "customer")
    _trade_table("purchases", "supplier")


def downgrade() -> None:
    op.drop_table("purchases")
    op.drop_table("sales")
    op.drop_table("products")
    op.drop_table("ledger_entries")
    op.drop_table("vouchers")
    op.drop_table("ledgers")
    sa.Enum(name="entry_type_enum").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="voucher_type_enum").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="ledger_group_enum").drop(op.get_bind(), checkfirst=True)

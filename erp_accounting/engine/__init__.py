"""Pure accounting and inventory calculations."""

from erp_accounting.engine.chart import default_ledgers
from erp_accounting.engine.entries import (
    create_sales_voucher_entries,
    create_purchase_voucher_entries,
)
from erp_accounting.engine.gst import gst_report
from erp_accounting.engine.numbering import generate_voucher_number
from erp_accounting.engine.reports import (
    trial_balance,
    profit_and_loss,
    balance_sheet,
    day_book,
    account_statement,
    ledger_net_balance,
    resolve_ledger_name,
)

__all__ = [
    "default_ledgers",
    "create_sales_voucher_entries",
    "create_purchase_voucher_entries",
    "gst_report",
    "generate_voucher_number",
    "trial_balance",
    "profit_and_loss",
    "balance_sheet",
    "day_book",
    "account_statement",
    "ledger_net_balance",
    "resolve_ledger_name",
]

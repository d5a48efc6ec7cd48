"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from erp_accounting.models.base import Base
from erp_accounting.models.enums import (
    LedgerGroup,
    StatementClass,
    VoucherType,
    EntryType,
    BalanceType,
    StockStatus,
)
from erp_accounting.models.ledger import Ledger
from erp_accounting.models.voucher import Voucher
from erp_accounting.models.ledger_entry import LedgerEntry
from erp_accounting.models.product import Product
from erp_accounting.models.trade import Sale, Purchase

__all__ = [
    "Base",
    "LedgerGroup",
    "StatementClass",
    "VoucherType",
    "EntryType",
    "BalanceType",
    "StockStatus",
    "Ledger",
    "Voucher",
    "LedgerEntry",
    "Product",
    "Sale",
    "Purchase",
]

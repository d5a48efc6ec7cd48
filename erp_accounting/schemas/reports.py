"""
Report records produced by the aggregation engine.

Every report is its own frozen record type. They are recomputed
on each request and never stored.
"""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field

from erp_accounting.models.enums import (
    BalanceType,
    LedgerGroup,
    StockStatus,
    VoucherType,
)

FROZEN = {"frozen": True}


# --- Trial Balance ---

class TrialBalanceRow(BaseModel):
    ledger_id: int
    ledger_name: str
    group: LedgerGroup
    debit_total: Decimal
    credit_total: Decimal
    balance: Decimal
    type: BalanceType

    model_config = FROZEN


# --- Profit & Loss ---

class LedgerSummary(BaseModel):
    ledger_id: int
    ledger_name: str
    total_debit: Decimal
    total_credit: Decimal
    balance: Decimal

    model_config = FROZEN


class ProfitLossStatement(BaseModel):
    direct_incomes: list[LedgerSummary]
    direct_expenses: list[LedgerSummary]
    indirect_incomes: list[LedgerSummary]
    indirect_expenses: list[LedgerSummary]
    gross_profit: Decimal
    net_profit: Decimal
    total_revenue: Decimal
    total_expenses: Decimal

    model_config = FROZEN


# --- Balance Sheet ---

class AssetTotals(BaseModel):
    current: Decimal
    fixed: Decimal
    investments: Decimal

    model_config = FROZEN


class LiabilityTotals(BaseModel):
    current: Decimal
    loans: Decimal
    capital: Decimal

    model_config = FROZEN


class BalanceSheet(BaseModel):
    assets: AssetTotals
    liabilities: LiabilityTotals
    net_profit: Decimal
    total_assets: Decimal
    total_liabilities: Decimal

    model_config = FROZEN


# --- Day Book ---

class DayBookRow(BaseModel):
    voucher_type: VoucherType
    voucher_number: str
    party_name: str | None
    narration: str
    debit_total: Decimal
    credit_total: Decimal

    model_config = FROZEN


class DayBook(BaseModel):
    date: dt.date
    transactions: list[DayBookRow]
    total_debit: Decimal
    total_credit: Decimal

    model_config = FROZEN


# --- Account Statement ---

class AccountTransaction(BaseModel):
    date: dt.date
    voucher_type: VoucherType
    voucher_number: str
    reference_number: str | None
    narration: str
    debit: Decimal | None
    credit: Decimal | None
    balance: Decimal

    model_config = FROZEN


class AccountStatement(BaseModel):
    ledger_id: int
    ledger_name: str
    opening_balance: Decimal
    transactions: list[AccountTransaction]
    closing_balance: Decimal

    model_config = FROZEN


# --- GST ---

class GSTSummary(BaseModel):
    gst_rate: Decimal
    taxable_value: Decimal
    igst_amount: Decimal
    cgst_amount: Decimal
    sgst_amount: Decimal
    total_amount: Decimal

    model_config = FROZEN


class GSTBucket(BaseModel):
    inter_state: list[GSTSummary] = Field(default_factory=list)
    intra_state: list[GSTSummary] = Field(default_factory=list)

    model_config = FROZEN


class GSTReport(BaseModel):
    outward_taxable: GSTBucket
    inward_taxable: GSTBucket
    total_tax_payable: Decimal
    total_tax_paid: Decimal
    net_tax_liability: Decimal

    model_config = FROZEN


# --- Inventory ---

class StockItem(BaseModel):
    product_code: str
    product_name: str
    brand: str
    opening_stock: int
    total_purchased: int
    total_sold: int
    current_stock: int
    reorder_level: int
    status: StockStatus

    model_config = FROZEN


class ProductProfit(BaseModel):
    product_code: str
    product_name: str
    total_purchase_value: Decimal
    total_sales_value: Decimal
    profit: Decimal
    profit_margin: Decimal

    model_config = FROZEN


class DashboardStats(BaseModel):
    total_products: int
    total_purchase_value: Decimal
    total_sales_value: Decimal
    total_profit: Decimal
    low_stock_count: int
    out_of_stock_count: int

    model_config = FROZEN

"""
Pydantic schemas for voucher operations.
"""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator, model_validator

from erp_accounting.models.enums import EntryType, VoucherType


# --- Request Schemas ---

class LedgerEntryCreate(BaseModel):
    """
    A single debit or credit line of a voucher.

    The ledger is referenced by id, or by name when the id is not
    known yet (the sales and purchase entry builders work by name).
    """
    ledger_id: int | None = None
    ledger_name: str | None = Field(default=None, max_length=100)
    amount: Decimal = Field(gt=0, decimal_places=4)
    entry_type: EntryType
    description: str | None = Field(default=None, max_length=255)

    @model_validator(mode="after")
    def must_reference_a_ledger(self):
        if self.ledger_id is None and not self.ledger_name:
            raise ValueError("entry must reference a ledger by id or name")
        return self


class VoucherCreate(BaseModel):
    """
    A complete voucher. Whether debits equal credits is checked
    by VoucherService, so that the rejection carries both totals.
    """
    voucher_type: VoucherType
    voucher_number: str | None = Field(default=None, max_length=30)
    date: dt.date
    reference_number: str | None = Field(default=None, max_length=100)
    narration: str = Field(default="")
    party_name: str | None = Field(default=None, max_length=100)
    entries: list[LedgerEntryCreate] = Field(default_factory=list)


class TradeVoucherCreate(BaseModel):
    """Shared shape of the sales and purchase voucher shortcuts."""
    party_name: str = Field(min_length=1, max_length=100)
    product_name: str = Field(min_length=1, max_length=100)
    quantity: Decimal
    rate: Decimal
    gst_percent: Decimal = Field(default=Decimal("0"))
    date: dt.date
    reference_number: str | None = Field(default=None, max_length=100)
    narration: str = Field(default="")

    @field_validator("quantity", "rate")
    @classmethod
    def must_be_positive(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("quantity and rate must be positive")
        return v


class SalesVoucherCreate(TradeVoucherCreate):
    sales_account: str = Field(default="Sales A/c", max_length=100)


class PurchaseVoucherCreate(TradeVoucherCreate):
    purchases_account: str = Field(default="Purchases A/c", max_length=100)


# --- Response Schemas ---

class LedgerEntryRead(BaseModel):
    id: int
    ledger_id: int
    ledger_name: str
    amount: Decimal
    entry_type: EntryType
    description: str | None

    model_config = {"from_attributes": True, "frozen": True}


class VoucherRead(BaseModel):
    """Voucher in API responses and report snapshots."""
    id: int
    voucher_type: VoucherType
    voucher_number: str
    date: dt.date
    reference_number: str | None
    narration: str
    party_name: str | None
    entries: tuple[LedgerEntryRead, ...]
    total_debit: Decimal
    total_credit: Decimal
    created_at: dt.datetime

    model_config = {"from_attributes": True, "frozen": True}

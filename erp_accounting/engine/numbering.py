"""
Document numbering.

Voucher numbers look like SLS-2403-0001: a three-letter prefix
for the voucher type, the two-digit year and month the voucher
was created in, and a four-digit sequence that counts vouchers
of that type.
"""

import datetime as dt
from collections.abc import Iterable

from erp_accounting.models.enums import VoucherType


VOUCHER_PREFIXES: dict[VoucherType, str] = {
    VoucherType.PAYMENT: "PYT",
    VoucherType.RECEIPT: "RCT",
    VoucherType.CONTRA: "CON",
    VoucherType.JOURNAL: "JNL",
    VoucherType.SALES: "SLS",
    VoucherType.PURCHASE: "PUR",
    VoucherType.DEBIT_NOTE: "DBN",
    VoucherType.CREDIT_NOTE: "CRN",
}


def format_voucher_number(
    voucher_type: VoucherType, as_of: dt.date, sequence: int
) -> str:
    prefix = VOUCHER_PREFIXES[voucher_type]
    return f"{prefix}-{as_of:%y%m}-{sequence:04d}"


def generate_voucher_number(
    voucher_type: VoucherType, vouchers: Iterable, as_of: dt.date
) -> str:
    """
    Next voucher number for a type: existing vouchers of that
    type + 1. The sequence is not reset per month.
    """
    count = sum(1 for v in vouchers if v.voucher_type == voucher_type)
    return format_voucher_number(voucher_type, as_of, count + 1)


def generate_invoice_no(prefix: str, count: int, as_of: dt.date) -> str:
    """Trade invoice number, e.g. SAL-2024-007."""
    return f"{prefix}-{as_of.year}-{count:03d}"


def generate_product_code(count: int) -> str:
    """Product code, e.g. PRD012."""
    return f"PRD{count:03d}"

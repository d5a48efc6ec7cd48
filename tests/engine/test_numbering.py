"""
Tests for voucher, invoice and product numbering.
"""

import datetime as dt
from types import SimpleNamespace

from erp_accounting.engine.numbering import (
    VOUCHER_PREFIXES,
    format_voucher_number,
    generate_invoice_no,
    generate_product_code,
    generate_voucher_number,
)
from erp_accounting.models.enums import VoucherType

MARCH_2024 = dt.date(2024, 3, 15)


def posted(voucher_type):
    return SimpleNamespace(voucher_type=voucher_type)


class TestVoucherNumber:

    def test_first_sales_voucher(self):
        assert (
            generate_voucher_number(VoucherType.SALES, [], MARCH_2024)
            == "SLS-2403-0001"
        )

    def test_second_sales_voucher(self):
        existing = [posted(VoucherType.SALES)]
        assert (
            generate_voucher_number(VoucherType.SALES, existing, MARCH_2024)
            == "SLS-2403-0002"
        )

    def test_sequence_counts_only_the_same_type(self):
        existing = [posted(VoucherType.SALES), posted(VoucherType.SALES)]
        assert (
            generate_voucher_number(VoucherType.PURCHASE, existing, MARCH_2024)
            == "PUR-2403-0001"
        )

    def test_sequence_not_reset_by_month(self):
        existing = [posted(VoucherType.JOURNAL)] * 3
        assert (
            generate_voucher_number(VoucherType.JOURNAL, existing, dt.date(2024, 4, 1))
            == "JNL-2404-0004"
        )

    def test_every_type_has_a_prefix(self):
        assert set(VOUCHER_PREFIXES) == set(VoucherType)
        assert len(set(VOUCHER_PREFIXES.values())) == len(VoucherType)

    def test_format(self):
        assert (
            format_voucher_number(VoucherType.CREDIT_NOTE, dt.date(2025, 11, 2), 12)
            == "CRN-2511-0012"
        )


class TestInvoiceAndProductCodes:

    def test_invoice_number(self):
        assert generate_invoice_no("SAL", 7, MARCH_2024) == "SAL-2024-007"
        assert generate_invoice_no("PUR", 1, MARCH_2024) == "PUR-2024-001"

    def test_product_code(self):
        assert generate_product_code(1) == "PRD001"
        assert generate_product_code(42) == "PRD042"

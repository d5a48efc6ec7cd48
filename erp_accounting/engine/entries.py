"""
Ledger entry builders for sales and purchase vouchers.

Both builders reference ledgers by name; VoucherService resolves
the names to ledger ids when the voucher is posted.
"""

from decimal import Decimal, ROUND_HALF_UP

from erp_accounting.models.enums import EntryType
from erp_accounting.schemas.voucher import LedgerEntryCreate

GST_PAYABLE = "GST Payable"
GST_INPUT_CREDIT = "GST Input Credit"

CENT = Decimal("0.01")


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def compute_line_totals(quantity, rate, gst_percent):
    """
    Return (subtotal, gst, grand_total) for one invoice line.

    Each part is rounded to paise, and the grand total is the sum
    of the rounded parts, so a voucher built from them balances.
    """
    quantity = to_decimal(quantity)
    rate = to_decimal(rate)
    gst_percent = to_decimal(gst_percent)

    if quantity <= 0:
        raise ValueError(f"quantity must be positive, got {quantity}")
    if rate <= 0:
        raise ValueError(f"rate must be positive, got {rate}")
    if gst_percent < 0:
        raise ValueError(f"GST percent must not be negative, got {gst_percent}")

    subtotal = money(quantity * rate)
    gst = money(subtotal * gst_percent / 100)
    return subtotal, gst, subtotal + gst


def _lines(*lines) -> list[LedgerEntryCreate]:
    """
    Build entries from (ledger_name, amount, entry_type, description)
    tuples. A zero-amount line (tax at 0%) is left out.
    """
    return [
        LedgerEntryCreate(
            ledger_name=name,
            amount=amount,
            entry_type=entry_type,
            description=description,
        )
        for name, amount, entry_type, description in lines
        if amount != 0
    ]


def create_sales_voucher_entries(
    customer_name: str,
    product_name: str,
    quantity,
    rate,
    gst_percent,
    sales_account_name: str = "Sales A/c",
) -> list[LedgerEntryCreate]:
    """
    Entries for a sale of one product.

        DEBIT  customer       grand total
        CREDIT sales account  subtotal
        CREDIT GST Payable    tax
    """
    subtotal, gst, grand_total = compute_line_totals(quantity, rate, gst_percent)

    return _lines(
        (customer_name, grand_total, EntryType.DEBIT,
         f"Sale of {quantity} units of {product_name}"),
        (sales_account_name, subtotal, EntryType.CREDIT,
         f"Sales of {quantity} units of {product_name}"),
        (GST_PAYABLE, gst, EntryType.CREDIT,
         f"GST @{gst_percent}% on sales"),
    )


def create_purchase_voucher_entries(
    supplier_name: str,
    product_name: str,
    quantity,
    rate,
    gst_percent,
    purchases_account_name: str = "Purchases A/c",
) -> list[LedgerEntryCreate]:
    """
    Entries for a purchase of one product.

        DEBIT  purchases account  subtotal
        DEBIT  GST Input Credit   tax
        CREDIT supplier           grand total
    """
    subtotal, gst, grand_total = compute_line_totals(quantity, rate, gst_percent)

    return _lines(
        (purchases_account_name, subtotal, EntryType.DEBIT,
         f"Purchase of {quantity} units of {product_name}"),
        (GST_INPUT_CREDIT, gst, EntryType.DEBIT,
         f"GST @{gst_percent}% on purchase"),
        (supplier_name, grand_total, EntryType.CREDIT,
         f"Purchase from {supplier_name}"),
    )

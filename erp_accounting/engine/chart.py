"""
Default chart of accounts for a new business.
"""

from decimal import Decimal

from erp_accounting.models.enums import LedgerGroup
from erp_accounting.schemas.ledger import LedgerCreate


# (name, group) in the order they are created. Customers and
# suppliers get their own ledgers later; the Sundry Debtors and
# Sundry Creditors entries are placeholders until then.
DEFAULT_LEDGERS: list[tuple[str, LedgerGroup]] = [
    ("Cash-in-Hand", LedgerGroup.CASH_IN_HAND),
    ("Bank Account", LedgerGroup.BANK_ACCOUNTS),
    ("Stock-in-Hand", LedgerGroup.CURRENT_ASSETS),
    ("Sundry Debtors", LedgerGroup.SUNDRY_DEBTORS),
    ("Sundry Creditors", LedgerGroup.SUNDRY_CREDITORS),
    ("GST Payable", LedgerGroup.DUTIES_AND_TAXES),
    ("GST Input Credit", LedgerGroup.DUTIES_AND_TAXES),
    ("CGST Payable", LedgerGroup.DUTIES_AND_TAXES),
    ("SGST Payable", LedgerGroup.DUTIES_AND_TAXES),
    ("IGST Payable", LedgerGroup.DUTIES_AND_TAXES),
    ("Sales A/c", LedgerGroup.DIRECT_INCOMES),
    ("Sales Discount Allowed", LedgerGroup.INDIRECT_EXPENSES),
    ("Purchases A/c", LedgerGroup.DIRECT_EXPENSES),
    ("Purchase Discount Received", LedgerGroup.INDIRECT_INCOMES),
    ("Interest Received", LedgerGroup.INDIRECT_INCOMES),
    ("Commission Received", LedgerGroup.INDIRECT_INCOMES),
    ("Rent Expense", LedgerGroup.INDIRECT_EXPENSES),
    ("Salary Expense", LedgerGroup.INDIRECT_EXPENSES),
    ("Electricity Expense", LedgerGroup.INDIRECT_EXPENSES),
    ("Telephone Expense", LedgerGroup.INDIRECT_EXPENSES),
    ("Advertising Expense", LedgerGroup.INDIRECT_EXPENSES),
    ("Travelling Expense", LedgerGroup.INDIRECT_EXPENSES),
    ("Office Expense", LedgerGroup.INDIRECT_EXPENSES),
    ("Bank Charges", LedgerGroup.INDIRECT_EXPENSES),
]


def default_ledgers(business_name: str) -> list[LedgerCreate]:
    """
    Return the standard ledgers for a business, capital account first.

    All opening balances are zero.
    """
    capital = LedgerCreate(
        name=f"{business_name} Capital A/c",
        group=LedgerGroup.CAPITAL_ACCOUNT,
        opening_balance=Decimal("0"),
    )
    return [capital] + [
        LedgerCreate(name=name, group=group, opening_balance=Decimal("0"))
        for name, group in DEFAULT_LEDGERS
    ]

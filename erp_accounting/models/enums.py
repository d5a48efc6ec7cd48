"""
Shared enumerations for database models.

Using Python enums mapped to database enums ensures that
only valid values can be stored. An unknown ledger group
or voucher type is caught at the database level, not just
in Python validation.
"""

import enum


class LedgerGroup(str, enum.Enum):
    """The fixed classification tags a ledger can belong to."""
    CAPITAL_ACCOUNT = "Capital Account"
    CURRENT_ASSETS = "Current Assets"
    CURRENT_LIABILITIES = "Current Liabilities"
    DIRECT_EXPENSES = "Direct Expenses"
    DIRECT_INCOMES = "Direct Incomes"
    FIXED_ASSETS = "Fixed Assets"
    INDIRECT_EXPENSES = "Indirect Expenses"
    INDIRECT_INCOMES = "Indirect Incomes"
    INVESTMENTS = "Investments"
    LOANS = "Loans (Liability)"
    BANK_ACCOUNTS = "Bank Accounts"
    CASH_IN_HAND = "Cash-in-Hand"
    SUNDRY_DEBTORS = "Sundry Debtors"
    SUNDRY_CREDITORS = "Sundry Creditors"
    DUTIES_AND_TAXES = "Duties & Taxes"
    PROVISIONS = "Provisions"


class StatementClass(str, enum.Enum):
    """Where a ledger group lands in the financial statements."""
    ASSETS = "ASSETS"
    LIABILITIES = "LIABILITIES"
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    CAPITAL = "CAPITAL"


# Each group maps to exactly one statement class.
GROUP_CLASSIFICATION: dict[LedgerGroup, StatementClass] = {
    LedgerGroup.CAPITAL_ACCOUNT: StatementClass.CAPITAL,
    LedgerGroup.CURRENT_ASSETS: StatementClass.ASSETS,
    LedgerGroup.FIXED_ASSETS: StatementClass.ASSETS,
    LedgerGroup.INVESTMENTS: StatementClass.ASSETS,
    LedgerGroup.BANK_ACCOUNTS: StatementClass.ASSETS,
    LedgerGroup.CASH_IN_HAND: StatementClass.ASSETS,
    LedgerGroup.SUNDRY_DEBTORS: StatementClass.ASSETS,
    LedgerGroup.CURRENT_LIABILITIES: StatementClass.LIABILITIES,
    LedgerGroup.LOANS: StatementClass.LIABILITIES,
    LedgerGroup.SUNDRY_CREDITORS: StatementClass.LIABILITIES,
    LedgerGroup.DUTIES_AND_TAXES: StatementClass.LIABILITIES,
    LedgerGroup.PROVISIONS: StatementClass.LIABILITIES,
    LedgerGroup.DIRECT_INCOMES: StatementClass.INCOME,
    LedgerGroup.INDIRECT_INCOMES: StatementClass.INCOME,
    LedgerGroup.DIRECT_EXPENSES: StatementClass.EXPENSE,
    LedgerGroup.INDIRECT_EXPENSES: StatementClass.EXPENSE,
}


class VoucherType(str, enum.Enum):
    """Kinds of journal transaction."""
    PAYMENT = "Payment"
    RECEIPT = "Receipt"
    CONTRA = "Contra"
    JOURNAL = "Journal"
    SALES = "Sales"
    PURCHASE = "Purchase"
    DEBIT_NOTE = "Debit Note"
    CREDIT_NOTE = "Credit Note"


class EntryType(str, enum.Enum):
    """Direction of a ledger entry."""
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class BalanceType(str, enum.Enum):
    """Which side a trial balance row nets out on."""
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"
    ZERO = "ZERO"


class StockStatus(str, enum.Enum):
    IN_STOCK = "in-stock"
    LOW_STOCK = "low-stock"
    OUT_OF_STOCK = "out-of-stock"

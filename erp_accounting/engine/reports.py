"""
Aggregation engine: financial statements derived from the journal.

Every function here is pure: it takes already-loaded ledgers and
vouchers (ORM objects or the frozen read schemas, anything with
the same attributes) and returns a new report record. Nothing is
cached between calls and nothing is written back.

Sign conventions:
- Opening balance: positive is debit-natured, negative is
  credit-natured.
- Trial balance and balance sheet work in the native sign
  (debits add, credits subtract).
- Profit & loss works in credit − debit, because income ledgers
  carry credit balances.
"""

import datetime as dt
from collections import defaultdict
from collections.abc import Iterable, Sequence
from decimal import Decimal

from erp_accounting.models.enums import BalanceType, EntryType, LedgerGroup
from erp_accounting.schemas.reports import (
    AccountStatement,
    AccountTransaction,
    AssetTotals,
    BalanceSheet,
    DayBook,
    DayBookRow,
    LedgerSummary,
    LiabilityTotals,
    ProfitLossStatement,
    TrialBalanceRow,
)

ZERO = Decimal("0")
UNKNOWN_LEDGER = "Unknown"


# --- Helpers ---

def in_range(voucher, start_date: dt.date, end_date: dt.date) -> bool:
    return start_date <= voucher.date <= end_date


def entries_by_ledger(vouchers: Iterable) -> dict[int, list]:
    """Index every entry of every voucher by the ledger it posts to."""
    index = defaultdict(list)
    for voucher in vouchers:
        for entry in voucher.entries:
            index[entry.ledger_id].append(entry)
    return index


def side_totals(ledger, entries: Iterable) -> tuple[Decimal, Decimal]:
    """
    (debit, credit) totals for a ledger: the opening balance on its
    natural side, plus the given entries.
    """
    if ledger.opening_balance >= 0:
        debit, credit = ledger.opening_balance, ZERO
    else:
        debit, credit = ZERO, -ledger.opening_balance

    for entry in entries:
        if entry.entry_type == EntryType.DEBIT:
            debit += entry.amount
        else:
            credit += entry.amount
    return debit, credit


def resolve_ledger_name(ledger_id: int, ledgers: Iterable) -> str:
    """Name of a ledger, or "Unknown" if it has been deleted."""
    for ledger in ledgers:
        if ledger.id == ledger_id:
            return ledger.name
    return UNKNOWN_LEDGER


def ledger_net_balance(ledger, vouchers: Iterable) -> Decimal:
    """Opening balance plus every debit minus every credit, full history."""
    debit, credit = side_totals(
        ledger, entries_by_ledger(vouchers).get(ledger.id, [])
    )
    return debit - credit


# --- Trial Balance ---

def trial_balance(ledgers: Sequence, vouchers: Sequence) -> list[TrialBalanceRow]:
    """
    One row per ledger over the whole journal.

    No date range applies here, unlike profit & loss and the
    balance sheet.
    """
    index = entries_by_ledger(vouchers)
    rows = []

    for ledger in ledgers:
        debit, credit = side_totals(ledger, index.get(ledger.id, []))
        net = debit - credit
        if net > 0:
            balance_type = BalanceType.DEBIT
        elif net < 0:
            balance_type = BalanceType.CREDIT
        else:
            balance_type = BalanceType.ZERO

        rows.append(TrialBalanceRow(
            ledger_id=ledger.id,
            ledger_name=ledger.name,
            group=ledger.group,
            debit_total=debit,
            credit_total=credit,
            balance=abs(net),
            type=balance_type,
        ))

    return rows


# --- Profit & Loss ---

def profit_and_loss(
    ledgers: Sequence,
    vouchers: Sequence,
    start_date: dt.date,
    end_date: dt.date,
) -> ProfitLossStatement:
    """
    Income and expense ledgers for the vouchers dated in
    [start_date, end_date].

    A ledger is listed only when credit − debit is non-zero; its
    summary carries the absolute value. Totals add those absolute
    values.
    """
    index = entries_by_ledger(v for v in vouchers if in_range(v, start_date, end_date))
    buckets: dict[LedgerGroup, list[LedgerSummary]] = {
        LedgerGroup.DIRECT_INCOMES: [],
        LedgerGroup.DIRECT_EXPENSES: [],
        LedgerGroup.INDIRECT_INCOMES: [],
        LedgerGroup.INDIRECT_EXPENSES: [],
    }

    for ledger in ledgers:
        if ledger.group not in buckets:
            continue
        debit, credit = side_totals(ledger, index.get(ledger.id, []))
        balance = credit - debit
        if balance == 0:
            continue
        buckets[ledger.group].append(LedgerSummary(
            ledger_id=ledger.id,
            ledger_name=ledger.name,
            total_debit=debit,
            total_credit=credit,
            balance=abs(balance),
        ))

    def total(group: LedgerGroup) -> Decimal:
        return sum((s.balance for s in buckets[group]), ZERO)

    total_revenue = total(LedgerGroup.DIRECT_INCOMES)
    total_expenses = total(LedgerGroup.DIRECT_EXPENSES)
    gross_profit = total_revenue - total_expenses
    net_profit = (
        gross_profit
        + total(LedgerGroup.INDIRECT_INCOMES)
        - total(LedgerGroup.INDIRECT_EXPENSES)
    )

    return ProfitLossStatement(
        direct_incomes=buckets[LedgerGroup.DIRECT_INCOMES],
        direct_expenses=buckets[LedgerGroup.DIRECT_EXPENSES],
        indirect_incomes=buckets[LedgerGroup.INDIRECT_INCOMES],
        indirect_expenses=buckets[LedgerGroup.INDIRECT_EXPENSES],
        gross_profit=gross_profit,
        net_profit=net_profit,
        total_revenue=total_revenue,
        total_expenses=total_expenses,
    )


# --- Balance Sheet ---

def balance_sheet(
    ledgers: Sequence,
    vouchers: Sequence,
    start_date: dt.date,
    end_date: dt.date,
) -> BalanceSheet:
    """
    Asset, liability and capital totals for the vouchers dated in
    [start_date, end_date].

    Only the groups below are placed; cash, bank, tax and provision
    ledgers do not appear. net_profit is not taken from the profit
    & loss statement and stays zero.
    """
    index = entries_by_ledger(v for v in vouchers if in_range(v, start_date, end_date))
    totals = defaultdict(lambda: ZERO)

    for ledger in ledgers:
        debit, credit = side_totals(ledger, index.get(ledger.id, []))
        balance = debit - credit

        if ledger.group in (LedgerGroup.CURRENT_ASSETS, LedgerGroup.SUNDRY_DEBTORS):
            totals["current_assets"] += balance
        elif ledger.group == LedgerGroup.FIXED_ASSETS:
            totals["fixed_assets"] += balance
        elif ledger.group == LedgerGroup.INVESTMENTS:
            totals["investments"] += balance
        elif ledger.group in (
            LedgerGroup.CURRENT_LIABILITIES, LedgerGroup.SUNDRY_CREDITORS
        ):
            totals["current_liabilities"] += abs(balance)
        elif ledger.group == LedgerGroup.LOANS:
            totals["loans"] += abs(balance)
        elif ledger.group == LedgerGroup.CAPITAL_ACCOUNT:
            totals["capital"] += balance

    assets = AssetTotals(
        current=totals["current_assets"],
        fixed=totals["fixed_assets"],
        investments=totals["investments"],
    )
    liabilities = LiabilityTotals(
        current=totals["current_liabilities"],
        loans=totals["loans"],
        capital=totals["capital"],
    )

    return BalanceSheet(
        assets=assets,
        liabilities=liabilities,
        net_profit=ZERO,
        total_assets=assets.current + assets.fixed + assets.investments,
        total_liabilities=liabilities.current + liabilities.loans + liabilities.capital,
    )


# --- Day Book ---

def day_book(vouchers: Sequence, on: dt.date) -> DayBook:
    """Every voucher dated exactly on the given calendar day."""
    day_vouchers = [v for v in vouchers if v.date == on]

    return DayBook(
        date=on,
        transactions=[
            DayBookRow(
                voucher_type=v.voucher_type,
                voucher_number=v.voucher_number,
                party_name=v.party_name,
                narration=v.narration,
                debit_total=v.total_debit,
                credit_total=v.total_credit,
            )
            for v in day_vouchers
        ],
        total_debit=sum((v.total_debit for v in day_vouchers), ZERO),
        total_credit=sum((v.total_credit for v in day_vouchers), ZERO),
    )


# --- Account Statement ---

def account_statement(
    ledger_id: int,
    ledgers: Sequence,
    vouchers: Sequence,
    start_date: dt.date,
    end_date: dt.date,
) -> AccountStatement:
    """
    Running balance of one ledger over [start_date, end_date].

    The running balance starts at zero: neither the ledger's
    opening balance nor vouchers dated before start_date are
    brought forward. Vouchers on the same date keep their journal
    order.
    """
    relevant = sorted(
        (v for v in vouchers if in_range(v, start_date, end_date)),
        key=lambda v: v.date,
    )

    balance = ZERO
    transactions = []
    for voucher in relevant:
        for entry in voucher.entries:
            if entry.ledger_id != ledger_id:
                continue
            is_debit = entry.entry_type == EntryType.DEBIT
            balance = balance + entry.amount if is_debit else balance - entry.amount
            transactions.append(AccountTransaction(
                date=voucher.date,
                voucher_type=voucher.voucher_type,
                voucher_number=voucher.voucher_number,
                reference_number=voucher.reference_number,
                narration=voucher.narration,
                debit=entry.amount if is_debit else None,
                credit=None if is_debit else entry.amount,
                balance=balance,
            ))

    return AccountStatement(
        ledger_id=ledger_id,
        ledger_name=resolve_ledger_name(ledger_id, ledgers),
        opening_balance=ZERO,
        transactions=transactions,
        closing_balance=balance,
    )

"""
Report service: loads one owner's books and hands them to the engine.

Each call reads the ledgers and vouchers fresh, freezes them into
read schemas, and computes the report from those snapshots.
Nothing is written.
"""

import datetime as dt

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from erp_accounting.engine import gst, reports
from erp_accounting.models.ledger import Ledger
from erp_accounting.models.trade import Purchase, Sale
from erp_accounting.models.voucher import Voucher
from erp_accounting.schemas.inventory import PurchaseRead, SaleRead
from erp_accounting.schemas.ledger import LedgerRead
from erp_accounting.schemas.reports import (
    AccountStatement,
    BalanceSheet,
    DayBook,
    GSTReport,
    ProfitLossStatement,
    TrialBalanceRow,
)
from erp_accounting.schemas.voucher import VoucherRead


class ReportService:

    def __init__(self, db: Session, owner_id: str):
        self.db = db
        self.owner_id = owner_id

    def _ledgers(self) -> list[LedgerRead]:
        ledgers = self.db.execute(
            select(Ledger)
            .where(Ledger.owner_id == self.owner_id)
            .order_by(Ledger.id)
        ).scalars().all()
        return [LedgerRead.model_validate(l) for l in ledgers]

    def _vouchers(self) -> list[VoucherRead]:
        vouchers = self.db.execute(
            select(Voucher)
            .where(Voucher.owner_id == self.owner_id)
            .options(selectinload(Voucher.entries))
            .order_by(Voucher.id)
        ).scalars().all()
        return [VoucherRead.model_validate(v) for v in vouchers]

    def trial_balance(self) -> list[TrialBalanceRow]:
        return reports.trial_balance(self._ledgers(), self._vouchers())

    def profit_and_loss(
        self, start_date: dt.date, end_date: dt.date
    ) -> ProfitLossStatement:
        return reports.profit_and_loss(
            self._ledgers(), self._vouchers(), start_date, end_date
        )

    def balance_sheet(self, start_date: dt.date, end_date: dt.date) -> BalanceSheet:
        return reports.balance_sheet(
            self._ledgers(), self._vouchers(), start_date, end_date
        )

    def day_book(self, on: dt.date) -> DayBook:
        return reports.day_book(self._vouchers(), on)

    def account_statement(
        self, ledger_id: int, start_date: dt.date, end_date: dt.date
    ) -> AccountStatement:
        """
        Statement for one ledger. An unknown ledger id gives an
        empty statement under the name "Unknown", not an error.
        """
        return reports.account_statement(
            ledger_id, self._ledgers(), self._vouchers(), start_date, end_date
        )

    def gst_report(self, start_date: dt.date, end_date: dt.date) -> GSTReport:
        sales = self.db.execute(
            select(Sale).where(Sale.owner_id == self.owner_id).order_by(Sale.id)
        ).scalars().all()
        purchases = self.db.execute(
            select(Purchase)
            .where(Purchase.owner_id == self.owner_id)
            .order_by(Purchase.id)
        ).scalars().all()

        return gst.gst_report(
            [SaleRead.model_validate(s) for s in sales],
            [PurchaseRead.model_validate(p) for p in purchases],
            start_date,
            end_date,
        )

"""
Report API endpoints.

Reports are read-only and recomputed on every request.
"""

import datetime as dt

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from erp_accounting.api.deps import get_owner_id
from erp_accounting.models.base import get_db
from erp_accounting.services.report_service import ReportService
from erp_accounting.schemas.reports import (
    AccountStatement,
    BalanceSheet,
    DayBook,
    GSTReport,
    ProfitLossStatement,
    TrialBalanceRow,
)

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/trial-balance", response_model=list[TrialBalanceRow])
def trial_balance(
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    """Every ledger over the whole journal; no date range applies."""
    return ReportService(db, owner_id).trial_balance()


@router.get("/profit-loss", response_model=ProfitLossStatement)
def profit_and_loss(
    start_date: dt.date,
    end_date: dt.date,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    return ReportService(db, owner_id).profit_and_loss(start_date, end_date)


@router.get("/balance-sheet", response_model=BalanceSheet)
def balance_sheet(
    start_date: dt.date,
    end_date: dt.date,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    return ReportService(db, owner_id).balance_sheet(start_date, end_date)


@router.get("/day-book", response_model=DayBook)
def day_book(
    date: dt.date,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    return ReportService(db, owner_id).day_book(date)


@router.get("/account-statement/{ledger_id}", response_model=AccountStatement)
def account_statement(
    ledger_id: int,
    start_date: dt.date,
    end_date: dt.date,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    """
    Running balance of one ledger. A deleted or unknown ledger
    gives an empty statement named "Unknown".
    """
    return ReportService(db, owner_id).account_statement(
        ledger_id, start_date, end_date
    )


@router.get("/gst", response_model=GSTReport)
def gst_report(
    start_date: dt.date,
    end_date: dt.date,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    """GST on recorded sales and purchase invoices, by rate."""
    return ReportService(db, owner_id).gst_report(start_date, end_date)

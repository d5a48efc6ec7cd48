"""
Tests for the ReportService: reports computed from the stored books.
"""

import datetime as dt
from decimal import Decimal

import pytest

from erp_accounting.models.enums import EntryType, LedgerGroup, VoucherType
from erp_accounting.services.inventory_service import InventoryService
from erp_accounting.services.ledger_service import LedgerService
from erp_accounting.services.report_service import ReportService
from erp_accounting.services.voucher_service import VoucherService
from erp_accounting.schemas.inventory import ProductCreate, PurchaseCreate, SaleCreate
from erp_accounting.schemas.ledger import LedgerCreate
from erp_accounting.schemas.voucher import LedgerEntryCreate, VoucherCreate

OWNER = "owner-1"
MARCH_1 = dt.date(2024, 3, 1)
MARCH_31 = dt.date(2024, 3, 31)


@pytest.fixture
def books(db_session):
    """Capital introduced in cash, one cash sale and one rent payment."""
    ledgers = LedgerService(db_session, OWNER)
    capital = ledgers.add_ledger(LedgerCreate(
        name="Capital", group=LedgerGroup.CAPITAL_ACCOUNT,
        opening_balance=Decimal("-10000"),
    ))
    cash = ledgers.add_ledger(LedgerCreate(
        name="Cash", group=LedgerGroup.CASH_IN_HAND,
        opening_balance=Decimal("10000"),
    ))
    sales = ledgers.add_ledger(LedgerCreate(
        name="Sales A/c", group=LedgerGroup.DIRECT_INCOMES,
    ))
    rent = ledgers.add_ledger(LedgerCreate(
        name="Rent", group=LedgerGroup.INDIRECT_EXPENSES,
    ))
    db_session.commit()

    vouchers = VoucherService(db_session, OWNER)
    vouchers.create_voucher(VoucherCreate(
        voucher_type=VoucherType.RECEIPT,
        date=dt.date(2024, 3, 2),
        narration="Cash sale",
        entries=[
            LedgerEntryCreate(ledger_id=cash.id, amount=Decimal("500"), entry_type=EntryType.DEBIT),
            LedgerEntryCreate(ledger_id=sales.id, amount=Decimal("500"), entry_type=EntryType.CREDIT),
        ],
    ))
    vouchers.create_voucher(VoucherCreate(
        voucher_type=VoucherType.PAYMENT,
        date=dt.date(2024, 3, 3),
        narration="Rent for March",
        entries=[
            LedgerEntryCreate(ledger_id=rent.id, amount=Decimal("200"), entry_type=EntryType.DEBIT),
            LedgerEntryCreate(ledger_id=cash.id, amount=Decimal("200"), entry_type=EntryType.CREDIT),
        ],
    ))
    db_session.commit()
    return {"capital": capital, "cash": cash, "sales": sales, "rent": rent}


class TestReportService:

    def test_trial_balance_balances(self, db_session, books):
        rows = ReportService(db_session, OWNER).trial_balance()

        assert len(rows) == 4
        assert sum(r.debit_total for r in rows) == sum(r.credit_total for r in rows)

    def test_profit_and_loss(self, db_session, books):
        pl = ReportService(db_session, OWNER).profit_and_loss(MARCH_1, MARCH_31)

        assert pl.gross_profit == Decimal("500")
        assert pl.net_profit == Decimal("300")

    def test_balance_sheet_capital(self, db_session, books):
        sheet = ReportService(db_session, OWNER).balance_sheet(MARCH_1, MARCH_31)
        assert sheet.liabilities.capital == Decimal("-10000")

    def test_day_book(self, db_session, books):
        book = ReportService(db_session, OWNER).day_book(dt.date(2024, 3, 3))

        assert [r.narration for r in book.transactions] == ["Rent for March"]
        assert book.total_debit == Decimal("200")

    def test_account_statement(self, db_session, books):
        statement = ReportService(db_session, OWNER).account_statement(
            books["cash"].id, MARCH_1, MARCH_31
        )

        assert [t.balance for t in statement.transactions] == [
            Decimal("500"), Decimal("300"),
        ]

    def test_deleted_ledger_shows_as_unknown(self, db_session, books):
        rent_id = books["rent"].id
        LedgerService(db_session, OWNER).delete_ledger(rent_id)
        db_session.commit()

        statement = ReportService(db_session, OWNER).account_statement(
            rent_id, MARCH_1, MARCH_31
        )
        assert statement.ledger_name == "Unknown"
        assert statement.closing_balance == Decimal("200")

    def test_new_ledger_does_not_inherit_deleted_ledgers_entries(
        self, db_session, books
    ):
        rent_id = books["rent"].id
        ledgers = LedgerService(db_session, OWNER)
        ledgers.delete_ledger(rent_id)
        db_session.commit()
        loan = ledgers.add_ledger(LedgerCreate(
            name="Bank Loan", group=LedgerGroup.LOANS,
        ))
        db_session.commit()

        assert loan.id != rent_id

        service = ReportService(db_session, OWNER)
        statement = service.account_statement(rent_id, MARCH_1, MARCH_31)
        assert statement.ledger_name == "Unknown"

        row = next(r for r in service.trial_balance() if r.ledger_id == loan.id)
        assert row.debit_total == Decimal("0")
        assert row.credit_total == Decimal("0")

    def test_reports_are_idempotent(self, db_session, books):
        service = ReportService(db_session, OWNER)
        assert service.trial_balance() == service.trial_balance()
        assert (
            service.profit_and_loss(MARCH_1, MARCH_31)
            == service.profit_and_loss(MARCH_1, MARCH_31)
        )

    def test_other_owner_has_empty_books(self, db_session, books):
        service = ReportService(db_session, "owner-2")

        assert service.trial_balance() == []
        assert service.day_book(dt.date(2024, 3, 2)).transactions == []

    def test_gst_report_from_invoices(self, db_session):
        inventory = InventoryService(db_session, OWNER)
        inventory.add_product(ProductCreate(
            name="Widget", purchase_rate=Decimal("80"),
            selling_rate=Decimal("100"), gst_percent=Decimal("18"),
        ))
        inventory.record_purchase(PurchaseCreate(
            supplier="XYZ", product_code="PRD001",
            date=dt.date(2024, 3, 4), quantity=10,
        ))
        inventory.record_sale(SaleCreate(
            customer="ABC", product_code="PRD001",
            date=dt.date(2024, 3, 5), quantity=5,
        ))
        db_session.commit()

        report = ReportService(db_session, OWNER).gst_report(MARCH_1, MARCH_31)

        assert report.total_tax_payable == Decimal("90")
        assert report.total_tax_paid == Decimal("144")
        assert report.net_tax_liability == Decimal("-54")
        assert report.outward_taxable.intra_state[0].gst_rate == Decimal("18.00")

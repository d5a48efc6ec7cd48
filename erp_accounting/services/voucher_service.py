"""
Voucher service: the journal.

create_voucher is the only way entries get into the books.
It enforces:
- the voucher has at least one entry
- every entry points at an existing ledger of this owner
- total debits equal total credits
- the voucher number is unique for the owner

If any check fails, nothing is written. The caller is
responsible for calling db.commit() afterwards.
"""

import datetime as dt
import logging
from decimal import Decimal

from sqlalchemy import select, func
from sqlalchemy.orm import Session, selectinload

from erp_accounting.engine.entries import (
    create_sales_voucher_entries,
    create_purchase_voucher_entries,
)
from erp_accounting.engine.numbering import format_voucher_number
from erp_accounting.errors import NotFoundError
from erp_accounting.models.enums import EntryType, VoucherType
from erp_accounting.models.ledger import Ledger
from erp_accounting.models.ledger_entry import LedgerEntry
from erp_accounting.models.voucher import Voucher
from erp_accounting.schemas.voucher import (
    PurchaseVoucherCreate,
    SalesVoucherCreate,
    VoucherCreate,
)
from erp_accounting.services.ledger_service import LedgerService

logger = logging.getLogger(__name__)


class VoucherService:

    def __init__(self, db: Session, owner_id: str):
        self.db = db
        self.owner_id = owner_id
        self.ledger_service = LedgerService(db, owner_id)

    def _resolve_ledger(self, ledger_id: int | None, ledger_name: str | None) -> Ledger:
        """Find the ledger an entry posts to, by id first, then by name."""
        if ledger_id is not None:
            return self.ledger_service.get_ledger(ledger_id)

        ledger = self.ledger_service.get_ledger_by_name(ledger_name)
        if not ledger:
            raise NotFoundError(f"Ledger '{ledger_name}' not found")
        return ledger

    def _number_taken(self, voucher_number: str) -> bool:
        return self.db.execute(
            select(Voucher.id).where(
                Voucher.owner_id == self.owner_id,
                Voucher.voucher_number == voucher_number,
            )
        ).first() is not None

    def next_voucher_number(
        self, voucher_type: VoucherType, as_of: dt.date | None = None
    ) -> str:
        """
        Count of this owner's vouchers of the type + 1.

        After a deletion that number can already be in use; the
        sequence then moves on to the next free one.
        """
        as_of = as_of or dt.date.today()
        count = self.db.execute(
            select(func.count(Voucher.id)).where(
                Voucher.owner_id == self.owner_id,
                Voucher.voucher_type == voucher_type,
            )
        ).scalar()

        sequence = count + 1
        number = format_voucher_number(voucher_type, as_of, sequence)
        while self._number_taken(number):
            sequence += 1
            number = format_voucher_number(voucher_type, as_of, sequence)
        return number

    def create_voucher(self, request: VoucherCreate) -> Voucher:
        """
        Post a balanced voucher with all of its entries.

        Raises ValueError for an empty or unbalanced voucher, an
        entry whose ledger cannot be found, or a voucher number
        that is already used.
        """
        if not request.entries:
            raise ValueError("Voucher must have at least one entry")

        # --- Enforce balance rule ---
        total_debit = sum(
            (e.amount for e in request.entries if e.entry_type == EntryType.DEBIT),
            Decimal("0"),
        )
        total_credit = sum(
            (e.amount for e in request.entries if e.entry_type == EntryType.CREDIT),
            Decimal("0"),
        )
        if total_debit != total_credit:
            raise ValueError(
                f"Voucher does not balance: "
                f"debits={total_debit}, credits={total_credit}"
            )

        # --- Resolve ledgers ---
        ledgers = [
            self._resolve_ledger(e.ledger_id, e.ledger_name)
            for e in request.entries
        ]

        # --- Voucher number ---
        if request.voucher_number:
            if self._number_taken(request.voucher_number):
                raise ValueError(
                    f"Voucher number '{request.voucher_number}' already exists"
                )
            voucher_number = request.voucher_number
        else:
            voucher_number = self.next_voucher_number(request.voucher_type)

        voucher = Voucher(
            owner_id=self.owner_id,
            voucher_type=request.voucher_type,
            voucher_number=voucher_number,
            date=request.date,
            reference_number=request.reference_number,
            narration=request.narration,
            party_name=request.party_name,
            total_debit=total_debit,
            total_credit=total_credit,
        )
        for position, (entry_data, ledger) in enumerate(zip(request.entries, ledgers)):
            voucher.entries.append(LedgerEntry(
                position=position,
                ledger_id=ledger.id,
                ledger_name=ledger.name,
                amount=entry_data.amount,
                entry_type=entry_data.entry_type,
                description=entry_data.description,
            ))

        self.db.add(voucher)
        self.db.flush()

        logger.info(
            f"Posted voucher {voucher.voucher_number} "
            f"({voucher.voucher_type.value}) for {total_debit} "
            f"with {len(voucher.entries)} entries"
        )
        return voucher

    def create_sales_voucher(self, request: SalesVoucherCreate) -> Voucher:
        """
        Sales voucher for one product line.

        The customer, sales account and GST Payable ledgers must
        already exist.
        """
        entries = create_sales_voucher_entries(
            request.party_name,
            request.product_name,
            request.quantity,
            request.rate,
            request.gst_percent,
            request.sales_account,
        )
        return self.create_voucher(VoucherCreate(
            voucher_type=VoucherType.SALES,
            date=request.date,
            reference_number=request.reference_number,
            narration=request.narration
            or f"Sale of {request.product_name} to {request.party_name}",
            party_name=request.party_name,
            entries=entries,
        ))

    def create_purchase_voucher(self, request: PurchaseVoucherCreate) -> Voucher:
        """
        Purchase voucher for one product line.

        The supplier, purchases account and GST Input Credit
        ledgers must already exist.
        """
        entries = create_purchase_voucher_entries(
            request.party_name,
            request.product_name,
            request.quantity,
            request.rate,
            request.gst_percent,
            request.purchases_account,
        )
        return self.create_voucher(VoucherCreate(
            voucher_type=VoucherType.PURCHASE,
            date=request.date,
            reference_number=request.reference_number,
            narration=request.narration
            or f"Purchase of {request.product_name} from {request.party_name}",
            party_name=request.party_name,
            entries=entries,
        ))

    def delete_voucher(self, voucher_id: int) -> None:
        """
        Delete a voucher and its entries outright.

        No reversing voucher is posted.
        """
        voucher = self.get_voucher(voucher_id)
        number = voucher.voucher_number
        self.db.delete(voucher)
        self.db.flush()
        logger.info(f"Deleted voucher {number} for owner {self.owner_id}")

    def get_voucher(self, voucher_id: int) -> Voucher:
        """Get a voucher by ID."""
        voucher = self.db.execute(
            select(Voucher)
            .where(Voucher.id == voucher_id, Voucher.owner_id == self.owner_id)
            .options(selectinload(Voucher.entries))
        ).scalar_one_or_none()

        if not voucher:
            raise NotFoundError(f"Voucher {voucher_id} not found")
        return voucher

    def _query(self):
        return (
            select(Voucher)
            .where(Voucher.owner_id == self.owner_id)
            .options(selectinload(Voucher.entries))
            .order_by(Voucher.id)
        )

    def list_vouchers(self) -> list[Voucher]:
        """All vouchers in posting order."""
        return list(self.db.execute(self._query()).scalars().all())

    def vouchers_by_type(self, voucher_type: VoucherType) -> list[Voucher]:
        vouchers = self.db.execute(
            self._query().where(Voucher.voucher_type == voucher_type)
        ).scalars().all()
        return list(vouchers)

    def vouchers_by_date_range(
        self, start_date: dt.date, end_date: dt.date
    ) -> list[Voucher]:
        """Vouchers dated in [start_date, end_date]."""
        vouchers = self.db.execute(
            self._query().where(
                Voucher.date >= start_date,
                Voucher.date <= end_date,
            )
        ).scalars().all()
        return list(vouchers)

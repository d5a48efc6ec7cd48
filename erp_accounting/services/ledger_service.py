"""
Ledger service: the chart of accounts for one owner.

Rules enforced here:
1. Ledger names are non-empty and unique per owner (case-insensitive)
2. current_balance starts at the opening balance and is only
   changed by an explicit edit or an explicit recompute
3. Deleting a ledger never checks vouchers that reference it

The service takes a database session as a constructor argument,
so the caller controls the transaction boundary.
"""

import logging
from decimal import Decimal

from sqlalchemy import select, func
from sqlalchemy.orm import Session, selectinload

from erp_accounting.engine.chart import default_ledgers
from erp_accounting.engine.reports import ledger_net_balance
from erp_accounting.errors import NotFoundError
from erp_accounting.models.ledger import Ledger
from erp_accounting.models.voucher import Voucher
from erp_accounting.schemas.ledger import LedgerCreate, LedgerUpdate

logger = logging.getLogger(__name__)


class LedgerService:

    def __init__(self, db: Session, owner_id: str):
        self.db = db
        self.owner_id = owner_id

    def add_ledger(self, request: LedgerCreate) -> Ledger:
        """
        Create a new ledger.

        Raises ValueError if the name is blank or already used.
        """
        if not request.name.strip():
            raise ValueError("ledger name must not be empty")

        if self.get_ledger_by_name(request.name):
            raise ValueError(f"Ledger '{request.name}' already exists")

        ledger = Ledger(
            owner_id=self.owner_id,
            name=request.name,
            group=request.group,
            opening_balance=request.opening_balance,
            current_balance=request.opening_balance,
        )
        self.db.add(ledger)
        self.db.flush()

        logger.info(
            f"Created ledger {ledger.id} '{ledger.name}' "
            f"({ledger.group.value}) for owner {self.owner_id}"
        )
        return ledger

    def update_ledger(self, ledger_id: int, request: LedgerUpdate) -> Ledger:
        """
        Apply the fields that were set on the request.

        The balance is not recomputed from vouchers; use
        recompute_balance for that.
        """
        ledger = self.get_ledger(ledger_id)
        updates = request.model_dump(exclude_unset=True, exclude_none=True)

        new_name = updates.get("name")
        if new_name and new_name.casefold() != ledger.name.casefold():
            if self.get_ledger_by_name(new_name):
                raise ValueError(f"Ledger '{new_name}' already exists")

        for field, value in updates.items():
            setattr(ledger, field, value)

        self.db.flush()
        return ledger

    def delete_ledger(self, ledger_id: int) -> None:
        """
        Remove a ledger.

        Vouchers that reference it are left as they are; reports
        show such entries under a fallback name.
        """
        ledger = self.get_ledger(ledger_id)
        self.db.delete(ledger)
        self.db.flush()
        logger.info(f"Deleted ledger {ledger_id} for owner {self.owner_id}")

    def get_ledger(self, ledger_id: int) -> Ledger:
        """Get a ledger by ID."""
        ledger = self.db.execute(
            select(Ledger).where(
                Ledger.id == ledger_id,
                Ledger.owner_id == self.owner_id,
            )
        ).scalar_one_or_none()

        if not ledger:
            raise NotFoundError(f"Ledger {ledger_id} not found")
        return ledger

    def get_ledger_by_name(self, name: str) -> Ledger | None:
        """
        Exact, case-insensitive name lookup.

        Names are compared with casefold() in Python, since SQLite's
        lower() only folds ASCII letters.
        """
        key = name.strip().casefold()
        for ledger in self.list_ledgers():
            if ledger.name.strip().casefold() == key:
                return ledger
        return None

    def list_ledgers(self) -> list[Ledger]:
        """All ledgers in creation order."""
        ledgers = self.db.execute(
            select(Ledger)
            .where(Ledger.owner_id == self.owner_id)
            .order_by(Ledger.id)
        ).scalars().all()
        return list(ledgers)

    def seed_default_chart_of_accounts(self, business_name: str) -> list[Ledger]:
        """
        Create the standard ledgers for a new business.

        Does nothing (returns an empty list) if the owner already
        has any ledger.
        """
        existing = self.db.execute(
            select(func.count(Ledger.id)).where(
                Ledger.owner_id == self.owner_id
            )
        ).scalar()

        if existing:
            logger.info(
                f"Owner {self.owner_id} already has {existing} ledgers, "
                f"skipping default chart of accounts"
            )
            return []

        created = [self.add_ledger(request) for request in default_ledgers(business_name)]
        logger.info(
            f"Seeded {len(created)} default ledgers for owner {self.owner_id}"
        )
        return created

    def recompute_balance(self, ledger_id: int) -> Decimal:
        """
        Refresh current_balance from the journal.

        current_balance = opening balance + all debits − all credits
        posted to this ledger, regardless of date.
        """
        ledger = self.get_ledger(ledger_id)
        vouchers = self.db.execute(
            select(Voucher)
            .where(Voucher.owner_id == self.owner_id)
            .options(selectinload(Voucher.entries))
        ).scalars().all()

        ledger.current_balance = ledger_net_balance(ledger, vouchers)
        self.db.flush()

        logger.info(
            f"Recomputed balance of ledger {ledger_id}: {ledger.current_balance}"
        )
        return ledger.current_balance

"""
Ledger model (chart of accounts).

Every account a business posts to (capital, cash, customers,
sales, GST payable, rent, ...) is a ledger. Voucher entries
reference ledgers by id.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    String, DateTime, Numeric,
    Enum as SAEnum, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from erp_accounting.models.base import Base
from erp_accounting.models.enums import LedgerGroup


class Ledger(Base):
    """
    A single account in an owner's chart of accounts.

    current_balance is a denormalized cache. It starts equal to
    opening_balance and only changes on an explicit edit or an
    explicit recompute; posting a voucher does not touch it.
    """

    __tablename__ = "ledgers"
    __table_args__ = (
        UniqueConstraint("owner_id", "name", name="uq_ledgers_owner_name"),
        # Ledger ids are never reused: entries of a deleted ledger
        # must not attach to a ledger created after it.
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    owner_id: Mapped[str] = mapped_column(
        String(64), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    group: Mapped[LedgerGroup] = mapped_column(
        SAEnum(LedgerGroup, name="ledger_group_enum", create_constraint=True),
        nullable=False,
    )
    opening_balance: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    current_balance: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<Ledger {self.name} ({self.group.value})>"

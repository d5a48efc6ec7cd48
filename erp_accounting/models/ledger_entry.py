"""
Ledger entry model.

Each entry is one debit or credit line of a voucher. A voucher's
entries are created with it and deleted with it; they are never
edited on their own.
"""

from decimal import Decimal

from sqlalchemy import (
    Integer, String, Numeric, ForeignKey,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from erp_accounting.models.base import Base
from erp_accounting.models.enums import EntryType


class LedgerEntry(Base):
    """
    A debit or credit line referencing one ledger.

    ledger_id is a plain integer, not a foreign key: a ledger may be
    deleted while vouchers still point at it, and reports resolve
    such references to a fallback label. ledger_name keeps the
    display name the line was posted with.
    """

    __tablename__ = "ledger_entries"

    id: Mapped[int] = mapped_column(primary_key=True)
    voucher_id: Mapped[int] = mapped_column(
        ForeignKey("vouchers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    ledger_id: Mapped[int] = mapped_column(
        Integer, nullable=False, index=True
    )
    ledger_name: Mapped[str] = mapped_column(String(100), nullable=False)
    amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    entry_type: Mapped[EntryType] = mapped_column(
        SAEnum(EntryType, name="entry_type_enum"),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(
        String(255), nullable=True
    )

    voucher: Mapped["Voucher"] = relationship(back_populates="entries")

    def __repr__(self) -> str:
        return (
            f"<LedgerEntry {self.entry_type.value} "
            f"{self.amount} {self.ledger_name}>"
        )

"""
Voucher model.

A voucher is one journal transaction: a header (type, number,
date, narration, party) plus two or more ledger entries whose
debits and credits balance. The balance rule is enforced by
VoucherService before anything is written.
"""

import datetime as dt
from decimal import Decimal

from sqlalchemy import (
    String, Date, DateTime, Numeric, Text,
    Enum as SAEnum, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from erp_accounting.models.base import Base
from erp_accounting.models.enums import VoucherType


class Voucher(Base):
    __tablename__ = "vouchers"
    __table_args__ = (
        UniqueConstraint(
            "owner_id", "voucher_number", name="uq_vouchers_owner_number"
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    owner_id: Mapped[str] = mapped_column(
        String(64), nullable=False, index=True
    )
    voucher_type: Mapped[VoucherType] = mapped_column(
        SAEnum(
            VoucherType,
            name="voucher_type_enum",
            create_constraint=True,
        ),
        nullable=False,
        index=True,
    )
    voucher_number: Mapped[str] = mapped_column(String(30), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    reference_number: Mapped[str | None] = mapped_column(
        String(100), nullable=True
    )
    narration: Mapped[str] = mapped_column(Text, nullable=False, default="")
    party_name: Mapped[str | None] = mapped_column(
        String(100), nullable=True
    )
    total_debit: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    total_credit: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime, nullable=False, default=dt.datetime.utcnow
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime, nullable=False, default=dt.datetime.utcnow, onupdate=dt.datetime.utcnow
    )

    # Entries live and die with their voucher
    entries: Mapped[list["LedgerEntry"]] = relationship(
        back_populates="voucher",
        cascade="all, delete-orphan",
        order_by="LedgerEntry.position",
    )

    def __repr__(self) -> str:
        return (
            f"<Voucher {self.voucher_number} "
            f"{self.voucher_type.value} {self.total_debit}>"
        )

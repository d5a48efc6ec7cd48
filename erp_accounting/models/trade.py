"""
Sale and purchase invoice models.

Each row is a single-product invoice line. Totals are computed
once by InventoryService when the invoice is recorded and stored
as-is; the GST report reads them back without recomputing.
"""

import datetime as dt
from decimal import Decimal

from sqlalchemy import String, Integer, Date, DateTime, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from erp_accounting.models.base import Base


class Sale(Base):
    __tablename__ = "sales"

    id: Mapped[int] = mapped_column(primary_key=True)
    owner_id: Mapped[str] = mapped_column(
        String(64), nullable=False, index=True
    )
    invoice_no: Mapped[str] = mapped_column(String(30), nullable=False)
    customer: Mapped[str] = mapped_column(String(100), nullable=False)
    product_code: Mapped[str] = mapped_column(
        String(20), nullable=False, index=True
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    rate: Mapped[Decimal] = mapped_column(Numeric(19, 4), nullable=False)
    total_value: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    gst_amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    grand_total: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime, nullable=False, default=dt.datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<Sale {self.invoice_no} {self.product_code} x{self.quantity}>"


class Purchase(Base):
    __tablename__ = "purchases"

    id: Mapped[int] = mapped_column(primary_key=True)
    owner_id: Mapped[str] = mapped_column(
        String(64), nullable=False, index=True
    )
    invoice_no: Mapped[str] = mapped_column(String(30), nullable=False)
    supplier: Mapped[str] = mapped_column(String(100), nullable=False)
    product_code: Mapped[str] = mapped_column(
        String(20), nullable=False, index=True
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    rate: Mapped[Decimal] = mapped_column(Numeric(19, 4), nullable=False)
    total_value: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    gst_amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    grand_total: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime, nullable=False, default=dt.datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<Purchase {self.invoice_no} {self.product_code} x{self.quantity}>"

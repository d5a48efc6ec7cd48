"""
Product model.

Inventory master data. Stock on hand is never stored; it is
derived from the opening stock plus purchases minus sales.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import String, Integer, DateTime, Numeric, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from erp_accounting.models.base import Base


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        UniqueConstraint(
            "owner_id", "product_code", name="uq_products_owner_code"
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    owner_id: Mapped[str] = mapped_column(
        String(64), nullable=False, index=True
    )
    # User-facing identifier, e.g. PRD001
    product_code: Mapped[str] = mapped_column(String(20), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    brand: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    category: Mapped[str] = mapped_column(
        String(100), nullable=False, default=""
    )
    purchase_rate: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    selling_rate: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    gst_percent: Mapped[Decimal] = mapped_column(
        Numeric(5, 2), nullable=False, default=Decimal("0")
    )
    opening_stock: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0
    )
    reorder_level: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<Product {self.product_code} {self.name}>"

"""
Pydantic schemas for products, sales and purchases.
"""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field


# --- Request Schemas ---

class ProductCreate(BaseModel):
    product_code: str | None = Field(default=None, max_length=20)
    name: str = Field(min_length=1, max_length=100)
    brand: str = Field(default="", max_length=100)
    category: str = Field(default="", max_length=100)
    purchase_rate: Decimal = Field(ge=0, decimal_places=4)
    selling_rate: Decimal = Field(ge=0, decimal_places=4)
    gst_percent: Decimal = Field(default=Decimal("0"), ge=0, le=100)
    opening_stock: int = Field(default=0, ge=0)
    reorder_level: int = Field(default=0, ge=0)


class SaleCreate(BaseModel):
    """
    Quantity and rate are range-checked by InventoryService, which
    also knows the stock available for the product.
    """
    invoice_no: str | None = Field(default=None, max_length=30)
    customer: str = Field(min_length=1, max_length=100)
    product_code: str = Field(min_length=1, max_length=20)
    date: dt.date
    quantity: int
    rate: Decimal | None = None


class PurchaseCreate(BaseModel):
    invoice_no: str | None = Field(default=None, max_length=30)
    supplier: str = Field(min_length=1, max_length=100)
    product_code: str = Field(min_length=1, max_length=20)
    date: dt.date
    quantity: int
    rate: Decimal | None = None


# --- Response Schemas ---

class ProductRead(BaseModel):
    id: int
    product_code: str
    name: str
    brand: str
    category: str
    purchase_rate: Decimal
    selling_rate: Decimal
    gst_percent: Decimal
    opening_stock: int
    reorder_level: int
    created_at: dt.datetime

    model_config = {"from_attributes": True, "frozen": True}


class SaleRead(BaseModel):
    id: int
    invoice_no: str
    customer: str
    product_code: str
    date: dt.date
    quantity: int
    rate: Decimal
    total_value: Decimal
    gst_amount: Decimal
    grand_total: Decimal

    model_config = {"from_attributes": True, "frozen": True}


class PurchaseRead(BaseModel):
    id: int
    invoice_no: str
    supplier: str
    product_code: str
    date: dt.date
    quantity: int
    rate: Decimal
    total_value: Decimal
    gst_amount: Decimal
    grand_total: Decimal

    model_config = {"from_attributes": True, "frozen": True}

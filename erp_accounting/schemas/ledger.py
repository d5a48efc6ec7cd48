"""
Pydantic schemas for ledger operations.

These define the API contract. LedgerRead doubles as the
immutable snapshot the report engine works on.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from erp_accounting.models.enums import LedgerGroup


# --- Request Schemas ---

class LedgerCreate(BaseModel):
    """Request to create a new ledger."""
    name: str = Field(max_length=100)
    group: LedgerGroup
    opening_balance: Decimal = Field(default=Decimal("0"), decimal_places=4)

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("ledger name must not be empty")
        return v


class LedgerUpdate(BaseModel):
    """
    Partial update. Only fields that are explicitly set are applied.

    current_balance is accepted here because editing is the only
    way it changes apart from an explicit recompute.
    """
    name: str | None = Field(default=None, max_length=100)
    group: LedgerGroup | None = None
    opening_balance: Decimal | None = Field(default=None, decimal_places=4)
    current_balance: Decimal | None = Field(default=None, decimal_places=4)

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("ledger name must not be empty")
        return v


class SeedChartRequest(BaseModel):
    """Request to seed the default chart of accounts."""
    business_name: str | None = Field(default=None, max_length=80)


# --- Response Schemas ---

class LedgerRead(BaseModel):
    """Ledger in API responses and report snapshots."""
    id: int
    name: str
    group: LedgerGroup
    opening_balance: Decimal
    current_balance: Decimal
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True, "frozen": True}

"""
Ledger API endpoints.

The API layer is thin: it maps service errors to status codes,
commits on success and rolls back on rejection. All business
rules live in LedgerService.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from erp_accounting.api.deps import get_owner_id
from erp_accounting.config import get_settings
from erp_accounting.errors import NotFoundError
from erp_accounting.models.base import get_db
from erp_accounting.services.ledger_service import LedgerService
from erp_accounting.schemas.ledger import (
    LedgerCreate,
    LedgerRead,
    LedgerUpdate,
    SeedChartRequest,
)

router = APIRouter(prefix="/ledgers", tags=["Ledgers"])


@router.post("", response_model=LedgerRead, status_code=201)
def create_ledger(
    request: LedgerCreate,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    """Create a new ledger in the chart of accounts."""
    service = LedgerService(db, owner_id)
    try:
        ledger = service.add_ledger(request)
        db.commit()
        return ledger
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=list[LedgerRead])
def list_ledgers(
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    return LedgerService(db, owner_id).list_ledgers()


@router.post("/seed", response_model=list[LedgerRead])
def seed_chart_of_accounts(
    request: SeedChartRequest | None = None,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    """
    Create the default chart of accounts.

    Returns the ledgers created, or an empty list if the owner
    already had ledgers.
    """
    business_name = (
        request.business_name if request and request.business_name
        else get_settings().DEFAULT_BUSINESS_NAME
    )
    service = LedgerService(db, owner_id)
    try:
        ledgers = service.seed_default_chart_of_accounts(business_name)
        db.commit()
        return ledgers
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{ledger_id}", response_model=LedgerRead)
def get_ledger(
    ledger_id: int,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    service = LedgerService(db, owner_id)
    try:
        return service.get_ledger(ledger_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/{ledger_id}", response_model=LedgerRead)
def update_ledger(
    ledger_id: int,
    request: LedgerUpdate,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    """
    Edit a ledger. The balance is not recomputed from vouchers.
    """
    service = LedgerService(db, owner_id)
    try:
        ledger = service.update_ledger(ledger_id, request)
        db.commit()
        return ledger
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{ledger_id}", status_code=204)
def delete_ledger(
    ledger_id: int,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    """
    Delete a ledger. Vouchers posted to it are not checked.
    """
    service = LedgerService(db, owner_id)
    try:
        service.delete_ledger(ledger_id)
        db.commit()
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{ledger_id}/recompute-balance", response_model=LedgerRead)
def recompute_balance(
    ledger_id: int,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    """
    Refresh current_balance from the opening balance and every
    voucher posted to the ledger.
    """
    service = LedgerService(db, owner_id)
    try:
        service.recompute_balance(ledger_id)
        db.commit()
        return service.get_ledger(ledger_id)
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))

"""
Voucher API endpoints.
"""

import datetime as dt

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from erp_accounting.api.deps import get_owner_id
from erp_accounting.errors import NotFoundError
from erp_accounting.models.base import get_db
from erp_accounting.models.enums import VoucherType
from erp_accounting.services.voucher_service import VoucherService
from erp_accounting.schemas.voucher import (
    PurchaseVoucherCreate,
    SalesVoucherCreate,
    VoucherCreate,
    VoucherRead,
)

router = APIRouter(prefix="/vouchers", tags=["Vouchers"])


def _post(db: Session, create):
    """
    Run a voucher-creating call, committing it or rolling back.

    An entry naming a missing ledger is bad input here, so
    NotFoundError maps to 400 like any other rejection.
    """
    try:
        voucher = create()
        db.commit()
        return voucher
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.post("", response_model=VoucherRead, status_code=201)
def create_voucher(
    request: VoucherCreate,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    """
    Post a voucher.

    Total debits must equal total credits and every entry must
    reference an existing ledger. A rejected voucher writes
    nothing.
    """
    service = VoucherService(db, owner_id)
    return _post(db, lambda: service.create_voucher(request))


@router.post("/sales", response_model=VoucherRead, status_code=201)
def create_sales_voucher(
    request: SalesVoucherCreate,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    """Post a sales voucher for one product line with GST."""
    service = VoucherService(db, owner_id)
    return _post(db, lambda: service.create_sales_voucher(request))


@router.post("/purchase", response_model=VoucherRead, status_code=201)
def create_purchase_voucher(
    request: PurchaseVoucherCreate,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    """Post a purchase voucher for one product line with GST."""
    service = VoucherService(db, owner_id)
    return _post(db, lambda: service.create_purchase_voucher(request))


@router.get("", response_model=list[VoucherRead])
def list_vouchers(
    voucher_type: VoucherType | None = None,
    start_date: dt.date | None = None,
    end_date: dt.date | None = None,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    """
    List vouchers in posting order, optionally filtered by type
    and by an inclusive date range.
    """
    if (start_date is None) != (end_date is None):
        raise HTTPException(
            status_code=400,
            detail="start_date and end_date must be given together",
        )

    service = VoucherService(db, owner_id)
    if start_date is not None:
        vouchers = service.vouchers_by_date_range(start_date, end_date)
        if voucher_type is not None:
            vouchers = [v for v in vouchers if v.voucher_type == voucher_type]
        return vouchers
    if voucher_type is not None:
        return service.vouchers_by_type(voucher_type)
    return service.list_vouchers()


@router.get("/{voucher_id}", response_model=VoucherRead)
def get_voucher(
    voucher_id: int,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    service = VoucherService(db, owner_id)
    try:
        return service.get_voucher(voucher_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{voucher_id}", status_code=204)
def delete_voucher(
    voucher_id: int,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    """Delete a voucher together with its entries."""
    service = VoucherService(db, owner_id)
    try:
        service.delete_voucher(voucher_id)
        db.commit()
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))

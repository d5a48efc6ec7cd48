"""
Inventory API endpoints: products, purchase and sales invoices,
and the stock and profit views derived from them.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from erp_accounting.api.deps import get_owner_id
from erp_accounting.errors import NotFoundError
from erp_accounting.models.base import get_db
from erp_accounting.services.inventory_service import InventoryService
from erp_accounting.schemas.inventory import (
    ProductCreate,
    ProductRead,
    PurchaseCreate,
    PurchaseRead,
    SaleCreate,
    SaleRead,
)
from erp_accounting.schemas.reports import DashboardStats, ProductProfit, StockItem

router = APIRouter(prefix="/inventory", tags=["Inventory"])


# --- Products ---

@router.post("/products", response_model=ProductRead, status_code=201)
def add_product(
    request: ProductCreate,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    service = InventoryService(db, owner_id)
    try:
        product = service.add_product(request)
        db.commit()
        return product
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/products", response_model=list[ProductRead])
def list_products(
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    return InventoryService(db, owner_id).list_products()


@router.get("/products/{product_code}", response_model=ProductRead)
def get_product(
    product_code: str,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    service = InventoryService(db, owner_id)
    try:
        return service.get_product(product_code)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/products/{product_code}", status_code=204)
def delete_product(
    product_code: str,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    service = InventoryService(db, owner_id)
    try:
        service.delete_product(product_code)
        db.commit()
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))


# --- Purchases ---

@router.post("/purchases", response_model=PurchaseRead, status_code=201)
def record_purchase(
    request: PurchaseCreate,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    """Record a purchase invoice. The rate defaults to the product's purchase rate."""
    service = InventoryService(db, owner_id)
    try:
        purchase = service.record_purchase(request)
        db.commit()
        return purchase
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/purchases", response_model=list[PurchaseRead])
def list_purchases(
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    return InventoryService(db, owner_id).list_purchases()


@router.delete("/purchases/{purchase_id}", status_code=204)
def delete_purchase(
    purchase_id: int,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    service = InventoryService(db, owner_id)
    try:
        service.delete_purchase(purchase_id)
        db.commit()
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))


# --- Sales ---

@router.post("/sales", response_model=SaleRead, status_code=201)
def record_sale(
    request: SaleCreate,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    """
    Record a sales invoice. Rejected when the quantity exceeds
    the stock on hand.
    """
    service = InventoryService(db, owner_id)
    try:
        sale = service.record_sale(request)
        db.commit()
        return sale
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/sales", response_model=list[SaleRead])
def list_sales(
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    return InventoryService(db, owner_id).list_sales()


@router.delete("/sales/{sale_id}", status_code=204)
def delete_sale(
    sale_id: int,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    service = InventoryService(db, owner_id)
    try:
        service.delete_sale(sale_id)
        db.commit()
    except NotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))


# --- Derived views ---

@router.get("/stock", response_model=list[StockItem])
def stock(
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    return InventoryService(db, owner_id).stock_items()


@router.get("/product-profit", response_model=list[ProductProfit])
def product_profit(
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    return InventoryService(db, owner_id).product_profit()


@router.get("/dashboard", response_model=DashboardStats)
def dashboard(
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_owner_id),
):
    return InventoryService(db, owner_id).dashboard()

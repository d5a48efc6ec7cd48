"""
Inventory service: products, purchase invoices and sales invoices.

Stock is never stored. A sale is checked against the stock
derived from the opening stock and every purchase and sale
recorded so far.

Recording an invoice here does not post a voucher; the journal
is kept separately through VoucherService.
"""

import datetime as dt
import logging

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from erp_accounting.engine import inventory
from erp_accounting.engine.entries import compute_line_totals
from erp_accounting.engine.numbering import generate_invoice_no, generate_product_code
from erp_accounting.errors import NotFoundError
from erp_accounting.models.product import Product
from erp_accounting.models.trade import Purchase, Sale
from erp_accounting.schemas.inventory import ProductCreate, PurchaseCreate, SaleCreate
from erp_accounting.schemas.reports import DashboardStats, ProductProfit, StockItem

logger = logging.getLogger(__name__)

SALE_PREFIX = "SAL"
PURCHASE_PREFIX = "PUR"


class InventoryService:

    def __init__(self, db: Session, owner_id: str):
        self.db = db
        self.owner_id = owner_id

    def _count(self, model) -> int:
        return self.db.execute(
            select(func.count(model.id)).where(model.owner_id == self.owner_id)
        ).scalar()

    # --- Products ---

    def add_product(self, request: ProductCreate) -> Product:
        """
        Create a product. Without a product code the next PRDnnn
        code is assigned.
        """
        code = request.product_code
        if not code:
            sequence = self._count(Product) + 1
            code = generate_product_code(sequence)
            # a deleted product leaves the count behind the highest code
            while self._find_product(code):
                sequence += 1
                code = generate_product_code(sequence)

        if self._find_product(code):
            raise ValueError(f"Product code '{code}' already exists")

        product = Product(
            owner_id=self.owner_id,
            product_code=code,
            name=request.name,
            brand=request.brand,
            category=request.category,
            purchase_rate=request.purchase_rate,
            selling_rate=request.selling_rate,
            gst_percent=request.gst_percent,
            opening_stock=request.opening_stock,
            reorder_level=request.reorder_level,
        )
        self.db.add(product)
        self.db.flush()

        logger.info(f"Added product {code} '{product.name}' for owner {self.owner_id}")
        return product

    def _find_product(self, product_code: str) -> Product | None:
        return self.db.execute(
            select(Product).where(
                Product.owner_id == self.owner_id,
                Product.product_code == product_code,
            )
        ).scalar_one_or_none()

    def get_product(self, product_code: str) -> Product:
        product = self._find_product(product_code)
        if not product:
            raise NotFoundError(f"Product {product_code} not found")
        return product

    def list_products(self) -> list[Product]:
        products = self.db.execute(
            select(Product)
            .where(Product.owner_id == self.owner_id)
            .order_by(Product.id)
        ).scalars().all()
        return list(products)

    def delete_product(self, product_code: str) -> None:
        """Invoices for the product are kept."""
        product = self.get_product(product_code)
        self.db.delete(product)
        self.db.flush()
        logger.info(f"Deleted product {product_code} for owner {self.owner_id}")

    # --- Invoices ---

    def record_purchase(self, request: PurchaseCreate) -> Purchase:
        product = self.get_product(request.product_code)
        rate = request.rate if request.rate is not None else product.purchase_rate
        total, gst, grand = compute_line_totals(
            request.quantity, rate, product.gst_percent
        )

        purchase = Purchase(
            owner_id=self.owner_id,
            invoice_no=request.invoice_no or generate_invoice_no(
                PURCHASE_PREFIX, self._count(Purchase) + 1, dt.date.today()
            ),
            supplier=request.supplier,
            product_code=product.product_code,
            date=request.date,
            quantity=request.quantity,
            rate=rate,
            total_value=total,
            gst_amount=gst,
            grand_total=grand,
        )
        self.db.add(purchase)
        self.db.flush()

        logger.info(
            f"Recorded purchase {purchase.invoice_no}: "
            f"{purchase.quantity} x {product.product_code} from {purchase.supplier}"
        )
        return purchase

    def record_sale(self, request: SaleCreate) -> Sale:
        """
        Record a sale invoice.

        Raises ValueError if the quantity is more than the stock
        available for the product.
        """
        product = self.get_product(request.product_code)
        rate = request.rate if request.rate is not None else product.selling_rate
        total, gst, grand = compute_line_totals(
            request.quantity, rate, product.gst_percent
        )

        available = inventory.available_stock(
            product, self.list_purchases(), self.list_sales()
        )
        if request.quantity > available:
            raise ValueError(
                f"Insufficient stock for {product.product_code}: "
                f"available={available}, requested={request.quantity}"
            )

        sale = Sale(
            owner_id=self.owner_id,
            invoice_no=request.invoice_no or generate_invoice_no(
                SALE_PREFIX, self._count(Sale) + 1, dt.date.today()
            ),
            customer=request.customer,
            product_code=product.product_code,
            date=request.date,
            quantity=request.quantity,
            rate=rate,
            total_value=total,
            gst_amount=gst,
            grand_total=grand,
        )
        self.db.add(sale)
        self.db.flush()

        logger.info(
            f"Recorded sale {sale.invoice_no}: "
            f"{sale.quantity} x {product.product_code} to {sale.customer}"
        )
        return sale

    def list_sales(self) -> list[Sale]:
        sales = self.db.execute(
            select(Sale).where(Sale.owner_id == self.owner_id).order_by(Sale.id)
        ).scalars().all()
        return list(sales)

    def list_purchases(self) -> list[Purchase]:
        purchases = self.db.execute(
            select(Purchase)
            .where(Purchase.owner_id == self.owner_id)
            .order_by(Purchase.id)
        ).scalars().all()
        return list(purchases)

    def _get_document(self, model, document_id: int):
        document = self.db.execute(
            select(model).where(
                model.id == document_id,
                model.owner_id == self.owner_id,
            )
        ).scalar_one_or_none()
        if not document:
            raise NotFoundError(f"{model.__name__} {document_id} not found")
        return document

    def delete_sale(self, sale_id: int) -> None:
        self.db.delete(self._get_document(Sale, sale_id))
        self.db.flush()
        logger.info(f"Deleted sale {sale_id} for owner {self.owner_id}")

    def delete_purchase(self, purchase_id: int) -> None:
        self.db.delete(self._get_document(Purchase, purchase_id))
        self.db.flush()
        logger.info(f"Deleted purchase {purchase_id} for owner {self.owner_id}")

    # --- Derived views ---

    def stock_items(self) -> list[StockItem]:
        return inventory.stock_items(
            self.list_products(), self.list_purchases(), self.list_sales()
        )

    def product_profit(self) -> list[ProductProfit]:
        return inventory.product_profit(
            self.list_products(), self.list_purchases(), self.list_sales()
        )

    def dashboard(self) -> DashboardStats:
        products = self.list_products()
        purchases = self.list_purchases()
        sales = self.list_sales()
        return inventory.dashboard_stats(
            products,
            inventory.stock_items(products, purchases, sales),
            inventory.product_profit(products, purchases, sales),
        )

"""
Stock and per-product profit derived from products, purchases
and sales. Stock is never stored; it is recomputed here.
"""

from collections.abc import Sequence
from decimal import Decimal, ROUND_HALF_UP

from erp_accounting.models.enums import StockStatus
from erp_accounting.schemas.reports import DashboardStats, ProductProfit, StockItem

ZERO = Decimal("0")


def _quantity_for(code: str, documents: Sequence) -> int:
    return sum(d.quantity for d in documents if d.product_code == code)


def available_stock(product, purchases: Sequence, sales: Sequence) -> int:
    """Opening stock + purchased − sold. Zero for an unknown product."""
    if product is None:
        return 0
    return (
        product.opening_stock
        + _quantity_for(product.product_code, purchases)
        - _quantity_for(product.product_code, sales)
    )


def stock_status(current_stock: int, reorder_level: int) -> StockStatus:
    if current_stock <= 0:
        return StockStatus.OUT_OF_STOCK
    if current_stock <= reorder_level:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


def stock_items(
    products: Sequence, purchases: Sequence, sales: Sequence
) -> list[StockItem]:
    items = []
    for product in products:
        purchased = _quantity_for(product.product_code, purchases)
        sold = _quantity_for(product.product_code, sales)
        current = product.opening_stock + purchased - sold
        items.append(StockItem(
            product_code=product.product_code,
            product_name=product.name,
            brand=product.brand,
            opening_stock=product.opening_stock,
            total_purchased=purchased,
            total_sold=sold,
            current_stock=current,
            reorder_level=product.reorder_level,
            status=stock_status(current, product.reorder_level),
        ))
    return items


def product_profit(
    products: Sequence, purchases: Sequence, sales: Sequence
) -> list[ProductProfit]:
    """
    Sales value minus purchase value per product, both before tax.
    Margin is a percentage of sales value, zero when nothing sold.
    """
    rows = []
    for product in products:
        code = product.product_code
        purchase_value = sum(
            (p.total_value for p in purchases if p.product_code == code), ZERO
        )
        sales_value = sum(
            (s.quantity * s.rate for s in sales if s.product_code == code), ZERO
        )
        profit = sales_value - purchase_value
        margin = (
            (profit / sales_value * 100).quantize(
                Decimal("0.01"), rounding=ROUND_HALF_UP
            )
            if sales_value > 0
            else ZERO
        )
        rows.append(ProductProfit(
            product_code=code,
            product_name=product.name,
            total_purchase_value=purchase_value,
            total_sales_value=sales_value,
            profit=profit,
            profit_margin=margin,
        ))
    return rows


def dashboard_stats(
    products: Sequence,
    items: Sequence[StockItem],
    profits: Sequence[ProductProfit],
) -> DashboardStats:
    total_purchase = sum((p.total_purchase_value for p in profits), ZERO)
    total_sales = sum((p.total_sales_value for p in profits), ZERO)
    return DashboardStats(
        total_products=len(products),
        total_purchase_value=total_purchase,
        total_sales_value=total_sales,
        total_profit=total_sales - total_purchase,
        low_stock_count=sum(1 for i in items if i.status == StockStatus.LOW_STOCK),
        out_of_stock_count=sum(
            1 for i in items if i.status == StockStatus.OUT_OF_STOCK
        ),
    )

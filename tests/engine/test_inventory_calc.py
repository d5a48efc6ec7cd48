"""
Tests for stock and product profit calculations.
"""

from decimal import Decimal
from types import SimpleNamespace

from erp_accounting.engine.inventory import (
    available_stock,
    dashboard_stats,
    product_profit,
    stock_items,
    stock_status,
)
from erp_accounting.models.enums import StockStatus


def product(code, opening=10, reorder=5, name="Widget"):
    return SimpleNamespace(
        product_code=code,
        name=name,
        brand="Acme",
        opening_stock=opening,
        reorder_level=reorder,
    )


def document(code, quantity, rate):
    rate = Decimal(rate)
    return SimpleNamespace(
        product_code=code,
        quantity=quantity,
        rate=rate,
        total_value=quantity * rate,
    )


class TestStock:

    def test_available_stock(self):
        widget = product("PRD001", opening=10)
        purchases = [document("PRD001", 5, "80"), document("PRD002", 99, "1")]
        sales = [document("PRD001", 3, "100")]

        assert available_stock(widget, purchases, sales) == 12

    def test_unknown_product_has_no_stock(self):
        assert available_stock(None, [], []) == 0

    def test_status_thresholds(self):
        assert stock_status(0, 5) == StockStatus.OUT_OF_STOCK
        assert stock_status(-2, 5) == StockStatus.OUT_OF_STOCK
        assert stock_status(5, 5) == StockStatus.LOW_STOCK
        assert stock_status(6, 5) == StockStatus.IN_STOCK

    def test_stock_items(self):
        [item] = stock_items(
            [product("PRD001", opening=10, reorder=5)],
            [document("PRD001", 2, "80")],
            [document("PRD001", 8, "100")],
        )

        assert item.total_purchased == 2
        assert item.total_sold == 8
        assert item.current_stock == 4
        assert item.status == StockStatus.LOW_STOCK


class TestProductProfit:

    def test_profit_and_margin(self):
        [row] = product_profit(
            [product("PRD001")],
            [document("PRD001", 10, "80")],
            [document("PRD001", 10, "100")],
        )

        assert row.total_purchase_value == Decimal("800")
        assert row.total_sales_value == Decimal("1000")
        assert row.profit == Decimal("200")
        assert row.profit_margin == Decimal("20.00")

    def test_no_sales_zero_margin(self):
        [row] = product_profit(
            [product("PRD001")], [document("PRD001", 1, "80")], []
        )
        assert row.profit == Decimal("-80")
        assert row.profit_margin == Decimal("0")

    def test_dashboard(self):
        products = [
            product("PRD001", opening=10, reorder=2),
            product("PRD002", opening=0, reorder=2),
            product("PRD003", opening=2, reorder=2),
        ]
        purchases = [document("PRD001", 5, "10")]
        sales = [document("PRD001", 5, "20")]

        stats = dashboard_stats(
            products,
            stock_items(products, purchases, sales),
            product_profit(products, purchases, sales),
        )

        assert stats.total_products == 3
        assert stats.total_purchase_value == Decimal("50")
        assert stats.total_sales_value == Decimal("100")
        assert stats.total_profit == Decimal("50")
        assert stats.low_stock_count == 1
        assert stats.out_of_stock_count == 1

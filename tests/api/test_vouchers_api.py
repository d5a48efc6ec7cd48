"""
Tests for voucher API endpoints.
"""

from decimal import Decimal

import pytest


@pytest.fixture
def ledgers(client):
    """Seed the default chart and add a customer and a supplier."""
    client.post("/ledgers/seed", json={"business_name": "Acme"})
    client.post("/ledgers", json={"name": "ABC Traders", "group": "Sundry Debtors"})
    client.post("/ledgers", json={"name": "XYZ Supplies", "group": "Sundry Creditors"})
    return {l["name"]: l["id"] for l in client.get("/ledgers").json()}


def payment(ledgers, amount_dr="500", amount_cr="500", date="2024-03-05", **extra):
    return {
        "voucher_type": "Payment",
        "date": date,
        "narration": "Office rent",
        "entries": [
            {"ledger_id": ledgers["Rent Expense"], "amount": amount_dr, "entry_type": "DEBIT"},
            {"ledger_id": ledgers["Cash-in-Hand"], "amount": amount_cr, "entry_type": "CREDIT"},
        ],
        **extra,
    }


class TestCreateVoucher:

    def test_balanced_voucher_returns_201(self, client, ledgers):
        response = client.post("/vouchers", json=payment(ledgers))
        assert response.status_code == 201

        data = response.json()
        assert data["voucher_type"] == "Payment"
        assert data["voucher_number"].startswith("PYT-")
        assert Decimal(data["total_debit"]) == Decimal("500")
        assert [e["ledger_name"] for e in data["entries"]] == [
            "Rent Expense", "Cash-in-Hand",
        ]

    def test_unbalanced_voucher_returns_400(self, client, ledgers):
        response = client.post("/vouchers", json=payment(ledgers, amount_cr="300"))

        assert response.status_code == 400
        assert "does not balance" in response.json()["detail"]
        assert client.get("/vouchers").json() == []

    def test_unknown_ledger_returns_400(self, client, ledgers):
        body = payment(ledgers)
        body["entries"][0]["ledger_id"] = 9999

        response = client.post("/vouchers", json=body)
        assert response.status_code == 400

    def test_zero_amount_returns_422(self, client, ledgers):
        response = client.post("/vouchers", json=payment(ledgers, "0", "0"))
        assert response.status_code == 422


class TestTradeVouchers:

    def test_sales_voucher(self, client, ledgers):
        response = client.post("/vouchers/sales", json={
            "party_name": "ABC Traders",
            "product_name": "Widget",
            "quantity": "10",
            "rate": "100",
            "gst_percent": "18",
            "date": "2024-03-05",
        })
        assert response.status_code == 201

        entries = response.json()["entries"]
        assert [(e["ledger_name"], e["entry_type"]) for e in entries] == [
            ("ABC Traders", "DEBIT"),
            ("Sales A/c", "CREDIT"),
            ("GST Payable", "CREDIT"),
        ]
        assert Decimal(entries[0]["amount"]) == Decimal("1180")

    def test_purchase_voucher(self, client, ledgers):
        response = client.post("/vouchers/purchase", json={
            "party_name": "XYZ Supplies",
            "product_name": "Widget",
            "quantity": "2",
            "rate": "50",
            "gst_percent": "12",
            "date": "2024-03-05",
        })
        assert response.status_code == 201
        assert response.json()["voucher_number"].startswith("PUR-")
        assert Decimal(response.json()["total_credit"]) == Decimal("112")

    def test_sales_voucher_missing_customer_returns_400(self, client, ledgers):
        response = client.post("/vouchers/sales", json={
            "party_name": "Nobody",
            "product_name": "Widget",
            "quantity": "1",
            "rate": "10",
            "date": "2024-03-05",
        })
        assert response.status_code == 400


class TestListAndDelete:

    def test_filters(self, client, ledgers):
        client.post("/vouchers", json=payment(ledgers, date="2024-03-05"))
        client.post("/vouchers", json=payment(ledgers, date="2024-04-05"))
        client.post("/vouchers", json={
            **payment(ledgers, date="2024-03-06"), "voucher_type": "Journal",
        })

        assert len(client.get("/vouchers").json()) == 3
        assert len(client.get("/vouchers", params={"voucher_type": "Payment"}).json()) == 2

        march = client.get("/vouchers", params={
            "start_date": "2024-03-01", "end_date": "2024-03-31",
        }).json()
        assert [v["date"] for v in march] == ["2024-03-05", "2024-03-06"]

        march_payments = client.get("/vouchers", params={
            "voucher_type": "Payment",
            "start_date": "2024-03-01",
            "end_date": "2024-03-31",
        }).json()
        assert len(march_payments) == 1

    def test_half_open_range_returns_400(self, client, ledgers):
        response = client.get("/vouchers", params={"start_date": "2024-03-01"})
        assert response.status_code == 400

    def test_get_and_delete(self, client, ledgers):
        voucher_id = client.post("/vouchers", json=payment(ledgers)).json()["id"]

        assert client.get(f"/vouchers/{voucher_id}").status_code == 200
        assert client.delete(f"/vouchers/{voucher_id}").status_code == 204
        assert client.get(f"/vouchers/{voucher_id}").status_code == 404

    def test_delete_missing_returns_404(self, client):
        assert client.delete("/vouchers/12345").status_code == 404

"""
Tests for report API endpoints.
"""

from decimal import Decimal

import pytest

MARCH = {"start_date": "2024-03-01", "end_date": "2024-03-31"}


@pytest.fixture
def posted(client):
    """A cash sale of 500 and a rent payment of 200 in March 2024."""
    client.post("/ledgers/seed")
    ids = {l["name"]: l["id"] for l in client.get("/ledgers").json()}

    def post(date, dr, cr, amount, voucher_type):
        response = client.post("/vouchers", json={
            "voucher_type": voucher_type,
            "date": date,
            "entries": [
                {"ledger_id": ids[dr], "amount": amount, "entry_type": "DEBIT"},
                {"ledger_id": ids[cr], "amount": amount, "entry_type": "CREDIT"},
            ],
        })
        assert response.status_code == 201

    post("2024-03-02", "Cash-in-Hand", "Sales A/c", "500", "Receipt")
    post("2024-03-03", "Rent Expense", "Cash-in-Hand", "200", "Payment")
    return ids


class TestReportsApi:

    def test_trial_balance(self, client, posted):
        rows = client.get("/reports/trial-balance").json()

        assert len(rows) == 25
        debit = sum(Decimal(r["debit_total"]) for r in rows)
        credit = sum(Decimal(r["credit_total"]) for r in rows)
        assert debit == credit == Decimal("700")

    def test_profit_loss(self, client, posted):
        data = client.get("/reports/profit-loss", params=MARCH).json()

        assert Decimal(data["gross_profit"]) == Decimal("500")
        assert Decimal(data["net_profit"]) == Decimal("300")
        assert [s["ledger_name"] for s in data["indirect_expenses"]] == ["Rent Expense"]

    def test_profit_loss_requires_dates(self, client):
        assert client.get("/reports/profit-loss").status_code == 422

    def test_balance_sheet(self, client, posted):
        response = client.get("/reports/balance-sheet", params=MARCH)

        assert response.status_code == 200
        assert Decimal(response.json()["net_profit"]) == Decimal("0")

    def test_day_book(self, client, posted):
        data = client.get("/reports/day-book", params={"date": "2024-03-02"}).json()

        assert data["date"] == "2024-03-02"
        assert len(data["transactions"]) == 1
        assert data["transactions"][0]["voucher_type"] == "Receipt"

    def test_empty_day_book(self, client, posted):
        data = client.get("/reports/day-book", params={"date": "2024-03-20"}).json()

        assert data["transactions"] == []
        assert Decimal(data["total_debit"]) == Decimal("0")

    def test_account_statement(self, client, posted):
        cash_id = posted["Cash-in-Hand"]
        data = client.get(
            f"/reports/account-statement/{cash_id}", params=MARCH
        ).json()

        assert data["ledger_name"] == "Cash-in-Hand"
        assert [Decimal(t["balance"]) for t in data["transactions"]] == [
            Decimal("500"), Decimal("300"),
        ]
        assert data["transactions"][1]["debit"] is None

    def test_account_statement_unknown_ledger(self, client):
        response = client.get("/reports/account-statement/999", params=MARCH)

        assert response.status_code == 200
        assert response.json()["ledger_name"] == "Unknown"

    def test_gst_report(self, client):
        client.post("/inventory/products", json={
            "name": "Widget",
            "purchase_rate": "80",
            "selling_rate": "100",
            "gst_percent": "18",
            "opening_stock": 10,
        })
        client.post("/inventory/sales", json={
            "customer": "ABC", "product_code": "PRD001",
            "date": "2024-03-05", "quantity": 2,
        })

        data = client.get("/reports/gst", params=MARCH).json()

        assert data["outward_taxable"]["inter_state"] == []
        [row] = data["outward_taxable"]["intra_state"]
        assert Decimal(row["cgst_amount"]) == Decimal("18")
        assert Decimal(row["sgst_amount"]) == Decimal("18")
        assert Decimal(data["net_tax_liability"]) == Decimal("36")

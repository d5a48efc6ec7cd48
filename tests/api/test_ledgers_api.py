"""
Tests for ledger API endpoints.

These test the HTTP layer: status codes, response format,
owner scoping and error mapping. Business logic is tested in
test_ledger_service.py.
"""

from decimal import Decimal


def create_ledger(client, name="Cash", group="Cash-in-Hand", opening="0"):
    return client.post("/ledgers", json={
        "name": name,
        "group": group,
        "opening_balance": opening,
    })


class TestCreateLedger:

    def test_create_returns_201(self, client):
        response = create_ledger(client, opening="1500.50")
        assert response.status_code == 201

        data = response.json()
        assert data["name"] == "Cash"
        assert data["group"] == "Cash-in-Hand"
        assert Decimal(data["current_balance"]) == Decimal("1500.50")

    def test_duplicate_name_returns_400(self, client):
        create_ledger(client)
        response = create_ledger(client, name="CASH")

        assert response.status_code == 400
        assert "already exists" in response.json()["detail"]

    def test_unknown_group_returns_422(self, client):
        response = create_ledger(client, group="Miscellaneous")
        assert response.status_code == 422

    def test_blank_name_returns_422(self, client):
        response = create_ledger(client, name="  ")
        assert response.status_code == 422


class TestReadLedgers:

    def test_get_ledger(self, client):
        ledger_id = create_ledger(client).json()["id"]

        response = client.get(f"/ledgers/{ledger_id}")
        assert response.status_code == 200
        assert response.json()["name"] == "Cash"

    def test_missing_ledger_returns_404(self, client):
        response = client.get("/ledgers/999")
        assert response.status_code == 404

    def test_list_is_scoped_by_owner(self, client):
        create_ledger(client)

        mine = client.get("/ledgers")
        theirs = client.get("/ledgers", headers={"X-Owner-Id": "someone-else"})

        assert len(mine.json()) == 1
        assert theirs.json() == []


class TestUpdateAndDelete:

    def test_patch_ledger(self, client):
        ledger_id = create_ledger(client).json()["id"]

        response = client.patch(f"/ledgers/{ledger_id}", json={"name": "Petty Cash"})
        assert response.status_code == 200
        assert response.json()["name"] == "Petty Cash"
        assert response.json()["group"] == "Cash-in-Hand"

    def test_patch_missing_returns_404(self, client):
        response = client.patch("/ledgers/999", json={"name": "X"})
        assert response.status_code == 404

    def test_delete_ledger(self, client):
        ledger_id = create_ledger(client).json()["id"]

        response = client.delete(f"/ledgers/{ledger_id}")
        assert response.status_code == 204
        assert client.get(f"/ledgers/{ledger_id}").status_code == 404

    def test_delete_missing_returns_404(self, client):
        assert client.delete("/ledgers/999").status_code == 404


class TestSeedAndRecompute:

    def test_seed_default_chart(self, client):
        response = client.post("/ledgers/seed", json={"business_name": "Sharma Stores"})

        assert response.status_code == 200
        names = [l["name"] for l in response.json()]
        assert len(names) == 25
        assert names[0] == "Sharma Stores Capital A/c"

    def test_seed_without_body_uses_default_name(self, client):
        response = client.post("/ledgers/seed")
        assert response.json()[0]["name"] == "My Business Capital A/c"

    def test_second_seed_creates_nothing(self, client):
        client.post("/ledgers/seed")
        response = client.post("/ledgers/seed")

        assert response.status_code == 200
        assert response.json() == []

    def test_recompute_balance(self, client):
        cash = create_ledger(client, opening="100").json()
        sales = create_ledger(client, name="Sales A/c", group="Direct Incomes").json()
        client.post("/vouchers", json={
            "voucher_type": "Receipt",
            "date": "2024-03-05",
            "entries": [
                {"ledger_id": cash["id"], "amount": "40", "entry_type": "DEBIT"},
                {"ledger_id": sales["id"], "amount": "40", "entry_type": "CREDIT"},
            ],
        })

        response = client.post(f"/ledgers/{cash['id']}/recompute-balance")

        assert response.status_code == 200
        assert Decimal(response.json()["current_balance"]) == Decimal("140")

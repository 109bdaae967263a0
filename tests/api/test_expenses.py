"""
Tests for the expense endpoints.

These check the HTTP contract and, above all, that one
account can never see or touch another account's expenses.
"""

MARKET_EXPENSE = {
    "date": "2024-03-05",
    "amount": 50.00,
    "responsibleParty": "Alice",
    "category": "Food",
    "location": "Market",
}


def create(client, headers, **overrides):
    response = client.post("/expenses", json={**MARKET_EXPENSE, **overrides}, headers=headers)
    assert response.status_code == 200
    return response.json()["id"]


class TestCreateExpense:

    def test_create_returns_200_with_id(self, client, alice_headers):
        response = client.post("/expenses", json=MARKET_EXPENSE, headers=alice_headers)
        assert response.status_code == 200
        assert response.json()["ok"] is True
        assert isinstance(response.json()["id"], int)

    def test_requires_session(self, client):
        response = client.post("/expenses", json=MARKET_EXPENSE)
        assert response.status_code == 401

    def test_missing_required_field_returns_400(self, client, alice_headers):
        payload = {k: v for k, v in MARKET_EXPENSE.items() if k != "location"}
        response = client.post("/expenses", json=payload, headers=alice_headers)
        assert response.status_code == 400

    def test_zero_amount_returns_400(self, client, alice_headers):
        response = client.post(
            "/expenses", json={**MARKET_EXPENSE, "amount": 0}, headers=alice_headers
        )
        assert response.status_code == 400

    def test_negative_amount_returns_400(self, client, alice_headers):
        response = client.post(
            "/expenses", json={**MARKET_EXPENSE, "amount": -3}, headers=alice_headers
        )
        assert response.status_code == 400

    def test_amount_that_rounds_to_zero_returns_400(self, client, alice_headers):
        response = client.post(
            "/expenses", json={**MARKET_EXPENSE, "amount": 0.001}, headers=alice_headers
        )
        assert response.status_code == 400
        assert client.get("/expenses", headers=alice_headers).json()["expenses"] == []

    def test_amount_is_rounded_to_cents(self, client, alice_headers):
        create(client, alice_headers, amount=0.005)

        expense = client.get("/expenses", headers=alice_headers).json()["expenses"][0]
        assert expense["amount"] == 0.01

    def test_amount_too_large_for_storage_returns_400(self, client, alice_headers):
        response = client.post(
            "/expenses", json={**MARKET_EXPENSE, "amount": 1e12}, headers=alice_headers
        )
        assert response.status_code == 400

    def test_non_numeric_amount_returns_400(self, client, alice_headers):
        response = client.post(
            "/expenses", json={**MARKET_EXPENSE, "amount": "lots"}, headers=alice_headers
        )
        assert response.status_code == 400

    def test_account_id_in_body_is_ignored(self, client, alice_headers, bob, bob_headers):
        create(client, alice_headers, accountId=bob.id)

        assert client.get("/expenses", headers=bob_headers).json()["expenses"] == []


class TestListExpenses:

    def test_created_expense_visible_to_owner_only(self, client, alice_headers, bob_headers):
        create(client, alice_headers)

        mine = client.get(
            "/expenses", params={"year": "2024", "month": "03"}, headers=alice_headers
        ).json()["expenses"]
        theirs = client.get(
            "/expenses", params={"year": "2024", "month": "03"}, headers=bob_headers
        ).json()["expenses"]

        assert len(mine) == 1
        assert mine[0]["date"] == "2024-03-05"
        assert mine[0]["amount"] == 50.0
        assert mine[0]["responsibleParty"] == "Alice"
        assert mine[0]["description"] == ""
        assert theirs == []

    def test_year_and_month_filter_and_ordering(self, client, alice_headers):
        early = create(client, alice_headers, date="2024-03-01")
        late_a = create(client, alice_headers, date="2024-03-28")
        late_b = create(client, alice_headers, date="2024-03-28")
        create(client, alice_headers, date="2024-04-02")
        create(client, alice_headers, date="2023-03-10")

        expenses = client.get(
            "/expenses", params={"year": 2024, "month": "03"}, headers=alice_headers
        ).json()["expenses"]

        assert [e["id"] for e in expenses] == [late_b, late_a, early]

    def test_invalid_month_returns_400(self, client, alice_headers):
        response = client.get("/expenses", params={"month": "13"}, headers=alice_headers)
        assert response.status_code == 400


class TestUpdateExpense:

    def test_owner_updates(self, client, alice_headers):
        expense_id = create(client, alice_headers)

        response = client.put(
            f"/expenses/{expense_id}",
            json={**MARKET_EXPENSE, "amount": 75.5, "description": "Big shop"},
            headers=alice_headers,
        )
        assert response.status_code == 200

        expense = client.get("/expenses", headers=alice_headers).json()["expenses"][0]
        assert expense["amount"] == 75.5
        assert expense["description"] == "Big shop"

    def test_update_validates_payload(self, client, alice_headers):
        expense_id = create(client, alice_headers)
        response = client.put(
            f"/expenses/{expense_id}",
            json={**MARKET_EXPENSE, "amount": 0},
            headers=alice_headers,
        )
        assert response.status_code == 400

    def test_update_to_amount_that_rounds_to_zero_returns_400(self, client, alice_headers):
        expense_id = create(client, alice_headers)
        response = client.put(
            f"/expenses/{expense_id}",
            json={**MARKET_EXPENSE, "amount": 0.001},
            headers=alice_headers,
        )
        assert response.status_code == 400

        expense = client.get("/expenses", headers=alice_headers).json()["expenses"][0]
        assert expense["amount"] == 50.0

    def test_other_account_update_succeeds_without_effect(
        self, client, alice_headers, bob_headers
    ):
        expense_id = create(client, alice_headers)

        response = client.put(
            f"/expenses/{expense_id}",
            json={**MARKET_EXPENSE, "amount": 1},
            headers=bob_headers,
        )
        assert response.status_code == 200

        expense = client.get("/expenses", headers=alice_headers).json()["expenses"][0]
        assert expense["amount"] == 50.0


class TestDeleteExpense:

    def test_owner_deletes(self, client, alice_headers):
        expense_id = create(client, alice_headers)

        assert client.delete(f"/expenses/{expense_id}", headers=alice_headers).status_code == 200
        assert client.get("/expenses", headers=alice_headers).json()["expenses"] == []

    def test_other_account_delete_succeeds_without_effect(
        self, client, alice_headers, bob_headers
    ):
        expense_id = create(client, alice_headers)

        response = client.delete(f"/expenses/{expense_id}", headers=bob_headers)
        assert response.status_code == 200
        assert len(client.get("/expenses", headers=alice_headers).json()["expenses"]) == 1

from __future__ import annotations


def create_expense(client, headers, category_id: int, amount: float = 10.0, date: str = "2024-01-10T12:00:00Z", **extra):
    payload = {"amount": amount, "categoryId": category_id, "date": date, **extra}
    return client.post("/api/expenses", headers=headers, json=payload)


def test_create_and_get_expense(client, api_user, api_food_id) -> None:
    response = create_expense(client, api_user, api_food_id, 42.5, description="Dinner", tags=["friends"], currency="EUR")

    assert response.status_code == 201
    body = response.json()
    assert body["amount"] == 42.5
    assert body["currency"] == "EUR"
    assert body["description"] == "Dinner"
    assert body["tags"] == ["friends"]
    assert body["categoryName"] == "Food & Dining"
    assert body["categoryColor"] == "#FF6B6B"
    assert body["date"].startswith("2024-01-10T12:00:00")

    fetched = client.get(f"/api/expenses/{body['id']}", headers=api_user)
    assert fetched.status_code == 200
    assert fetched.json() == body


def test_create_with_invalid_category(client, api_user) -> None:
    response = create_expense(client, api_user, 999)

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid category"}


def test_list_filters(client, api_user, api_food_id) -> None:
    categories = client.get("/api/categories", headers=api_user).json()
    travel_id = next(c["id"] for c in categories if c["name"] == "Travel")
    create_expense(client, api_user, api_food_id, 1.0, "2024-01-01T00:00:00Z")
    create_expense(client, api_user, api_food_id, 2.0, "2024-01-15T00:00:00Z")
    create_expense(client, api_user, travel_id, 3.0, "2024-01-31T00:00:00Z")

    everything = client.get("/api/expenses", headers=api_user).json()
    food_only = client.get("/api/expenses", headers=api_user, params={"categoryId": api_food_id}).json()
    window = client.get(
        "/api/expenses",
        headers=api_user,
        params={"startDate": "2024-01-15T00:00:00Z", "endDate": "2024-01-31T00:00:00Z"},
    ).json()

    assert [e["amount"] for e in everything] == [3.0, 2.0, 1.0]
    assert [e["amount"] for e in food_only] == [2.0, 1.0]
    assert [e["amount"] for e in window] == [3.0, 2.0]


def test_update_expense(client, api_user, api_food_id) -> None:
    created = create_expense(client, api_user, api_food_id, 10.0, description="Lunch").json()

    response = client.put(f"/api/expenses/{created['id']}", headers=api_user, json={"amount": 12.75, "description": ""})

    assert response.status_code == 200
    assert response.json()["amount"] == 12.75
    assert response.json()["description"] == "Lunch"


def test_missing_expense(client, api_user) -> None:
    assert client.get("/api/expenses/404", headers=api_user).status_code == 404
    assert client.put("/api/expenses/404", headers=api_user, json={"amount": 1}).status_code == 404
    assert client.delete("/api/expenses/404", headers=api_user).json() == {"message": "Expense not found"}


def test_delete_expense(client, api_user, api_food_id) -> None:
    created = create_expense(client, api_user, api_food_id).json()

    assert client.delete(f"/api/expenses/{created['id']}", headers=api_user).status_code == 204
    assert client.get("/api/expenses", headers=api_user).json() == []

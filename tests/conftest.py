"""Shared fixtures: an in-memory SQLite database, seeded users and an API client."""

from __future__ import annotations

import os

# Must be set before the models package builds its engine
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from main import app
from models import Category, SessionLocal, add_default_categories, create_all_tables, drop_all_tables
from services import CategoryService, ExpenseService, UserService


@pytest.fixture
def db_session():
    create_all_tables()
    session = SessionLocal()
    add_default_categories(session)
    try:
        yield session
    finally:
        session.close()
        drop_all_tables()


@pytest.fixture
def user(db_session):
    return UserService(db_session).create_user("ada@example.com", "Ada", "Lovelace")


@pytest.fixture
def other_user(db_session):
    return UserService(db_session).create_user("grace@example.com", "Grace", "Hopper")


@pytest.fixture
def food(db_session) -> Category:
    return db_session.query(Category).filter_by(name="Food & Dining", is_system=True).one()


@pytest.fixture
def travel(db_session) -> Category:
    return db_session.query(Category).filter_by(name="Travel", is_system=True).one()


@pytest.fixture
def custom_category(db_session, user) -> Category:
    return CategoryService(db_session).add_custom_category(user.id, "Coffee", "☕", "#6F4E37")


@pytest.fixture
def add_expense(db_session):
    expense_service = ExpenseService(db_session)

    def _add(owner, category, amount: str, when: datetime):
        return expense_service.add_expense(owner.id, Decimal(amount), category.id, when)

    return _add


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    drop_all_tables()


@pytest.fixture
def api_user(client) -> dict:
    response = client.post("/api/users", json={"email": "ada@example.com", "firstName": "Ada", "lastName": "Lovelace"})
    assert response.status_code == 201
    return {"X-User-Id": str(response.json()["id"])}


@pytest.fixture
def api_food_id(client, api_user) -> int:
    categories = client.get("/api/categories", headers=api_user).json()
    return next(c["id"] for c in categories if c["name"] == "Food & Dining")

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from models import Category, SYSTEM_CATEGORIES, add_default_categories
from services import BudgetService, CategoryInUse, CategoryService, DuplicateCategory, is_category_visible


def test_system_categories_seeded_once(db_session) -> None:
    add_default_categories(db_session)

    system = db_session.query(Category).filter_by(is_system=True).all()

    assert len(system) == len(SYSTEM_CATEGORIES)
    assert all(c.user_id is None for c in system)


def test_visibility_predicate(db_session, user, other_user, food, custom_category) -> None:
    assert is_category_visible(food, user.id)
    assert is_category_visible(food, other_user.id)
    assert is_category_visible(custom_category, user.id)
    assert not is_category_visible(custom_category, other_user.id)
    assert not is_category_visible(None, user.id)


def test_get_categories_lists_system_and_own_sorted(db_session, user, other_user, custom_category) -> None:
    CategoryService(db_session).add_custom_category(other_user.id, "Golf")

    names = [c.name for c in CategoryService(db_session).get_categories(user.id)]

    assert "Coffee" in names
    assert "Golf" not in names
    assert names == sorted(names)
    assert len(names) == len(SYSTEM_CATEGORIES) + 1


def test_get_visible_category(db_session, user, other_user, custom_category) -> None:
    category_service = CategoryService(db_session)

    assert category_service.get_visible_category(user.id, custom_category.id) == custom_category
    assert category_service.get_visible_category(other_user.id, custom_category.id) is None


@pytest.mark.parametrize("name", ["coffee", "TRAVEL"])
def test_duplicate_names_rejected(db_session, user, custom_category, name) -> None:
    with pytest.raises(DuplicateCategory):
        CategoryService(db_session).add_custom_category(user.id, name)


def test_wildcard_characters_are_matched_literally(db_session, user) -> None:
    category_service = CategoryService(db_session)
    category_service.add_custom_category(user.id, "Rent")

    ren = category_service.add_custom_category(user.id, "Ren_")
    percent = category_service.add_custom_category(user.id, "%")

    assert ren.name == "Ren_"
    assert percent.name == "%"
    with pytest.raises(DuplicateCategory):
        category_service.add_custom_category(user.id, "ren_")


def test_same_custom_name_allowed_for_another_user(db_session, other_user, custom_category) -> None:
    coffee = CategoryService(db_session).add_custom_category(other_user.id, "Coffee")

    assert coffee.user_id == other_user.id


def test_update_own_category_ignores_empty_values(db_session, user, custom_category) -> None:
    updated = CategoryService(db_session).update_category(user.id, custom_category.id, name="Cafés", icon="", color=None)

    assert updated.name == "Cafés"
    assert updated.icon == "☕"
    assert updated.color == "#6F4E37"


def test_system_and_foreign_categories_are_read_only(db_session, user, other_user, food, custom_category) -> None:
    category_service = CategoryService(db_session)

    assert category_service.update_category(user.id, food.id, name="Groceries") is None
    assert category_service.update_category(other_user.id, custom_category.id, name="Tea") is None
    assert category_service.delete_category(user.id, food.id) is False
    assert category_service.delete_category(other_user.id, custom_category.id) is False


def test_delete_unused_category(db_session, user, custom_category) -> None:
    assert CategoryService(db_session).delete_category(user.id, custom_category.id) is True
    assert db_session.query(Category).filter_by(name="Coffee").first() is None


def test_delete_category_used_by_expense(db_session, user, custom_category, add_expense) -> None:
    add_expense(user, custom_category, "3.50", datetime(2024, 1, 1, tzinfo=timezone.utc))

    with pytest.raises(CategoryInUse):
        CategoryService(db_session).delete_category(user.id, custom_category.id)


def test_delete_category_used_by_budget(db_session, user, custom_category) -> None:
    BudgetService(db_session).create_budget(user.id, custom_category.id, Decimal("20.00"), "Weekly", datetime(2024, 1, 1, tzinfo=timezone.utc))

    with pytest.raises(CategoryInUse):
        CategoryService(db_session).delete_category(user.id, custom_category.id)

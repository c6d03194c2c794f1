import logging
from sqlalchemy import func
from sqlalchemy.orm import Session
from models import Category, Expense, Budget
from services.exceptions import DuplicateCategory, CategoryInUse

logger = logging.getLogger(__name__)


def is_category_visible(category: Category, user_id: int) -> bool:
    """System categories are shared by everyone; custom ones only by their owner."""
    if category is None:
        return False
    return bool(category.is_system) or category.user_id == user_id


class CategoryService:
    def __init__(self, db_session: Session):
        self.db_session = db_session

    def get_categories(self, user_id: int):
        return self.db_session.query(Category).filter(
            (Category.is_system == True) | (Category.user_id == user_id)
        ).order_by(Category.name).all()

    def get_visible_category(self, user_id: int, category_id: int):
        category = self.db_session.query(Category).filter(Category.id == category_id).first()
        if not is_category_visible(category, user_id):
            return None
        return category

    def _get_own_category(self, user_id: int, category_id: int):
        return self.db_session.query(Category).filter(
            Category.id == category_id,
            Category.user_id == user_id,
            Category.is_system == False
        ).first()

    def add_custom_category(self, user_id: int, name: str, icon: str = "", color: str = "#000000") -> Category:
        # Check for duplicates (case-insensitive) for the user or in system categories
        existing_category = self.db_session.query(Category).filter(
            (Category.user_id == user_id) | (Category.is_system == True),
            func.lower(Category.name) == name.lower()
        ).first()

        if existing_category:
            raise DuplicateCategory("Category already exists.")

        new_category = Category(user_id=user_id, name=name, icon=icon, color=color, is_system=False)
        self.db_session.add(new_category)
        self.db_session.commit()
        self.db_session.refresh(new_category)
        logger.info(f"User {user_id} created category {new_category.id} ('{new_category.name}')")
        return new_category

    def update_category(self, user_id: int, category_id: int, name: str = None, icon: str = None, color: str = None):
        category = self._get_own_category(user_id, category_id)
        if not category:
            return None

        if name:
            category.name = name
        if icon:
            category.icon = icon
        if color:
            category.color = color

        self.db_session.commit()
        self.db_session.refresh(category)
        return category

    def delete_category(self, user_id: int, category_id: int) -> bool:
        category = self._get_own_category(user_id, category_id)
        if not category:
            return False

        has_expenses = self.db_session.query(Expense.id).filter(Expense.category_id == category_id).first() is not None
        has_budgets = self.db_session.query(Budget.id).filter(Budget.category_id == category_id).first() is not None
        if has_expenses or has_budgets:
            raise CategoryInUse("Cannot delete category that is being used")

        self.db_session.delete(category)
        self.db_session.commit()
        logger.info(f"User {user_id} deleted category {category_id}")
        return True

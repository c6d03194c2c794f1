import logging
from decimal import Decimal
from sqlalchemy.orm import Session, joinedload
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from models import Expense
from services.category_service import CategoryService
from services.exceptions import InvalidCategory, StoreUnavailable
from utils.datetime_utils import to_utc, utc_now
import datetime

logger = logging.getLogger(__name__)

class ExpenseService:
    def __init__(self, db_session: Session):
        self.db_session = db_session
        self.category_service = CategoryService(db_session)

    def sum_expense_amounts(self, user_id: int, category_id: int, start_date: datetime.datetime, end_date: datetime.datetime) -> Decimal:
        """Total of the user's expenses in a category dated within [start_date, end_date]."""
        try:
            total = self.db_session.query(func.sum(Expense.amount)).filter(
                Expense.user_id == user_id,
                Expense.category_id == category_id,
                Expense.date >= to_utc(start_date),
                Expense.date <= to_utc(end_date) # Both bounds inclusive
            ).scalar()
        except SQLAlchemyError as exc:
            logger.error(f"Expense sum query failed for user {user_id}, category {category_id}: {exc}")
            raise StoreUnavailable("Expense store query failed") from exc
        if total is None:
            return Decimal("0")
        return Decimal(total)

    def _check_category(self, user_id: int, category_id: int):
        category = self.category_service.get_visible_category(user_id, category_id)
        if not category:
            raise InvalidCategory("Invalid category")
        return category

    def add_expense(self, user_id: int, amount: Decimal, category_id: int, date: datetime.datetime,
                    description: str = "", currency: str = "USD", tags: list = None, receipt_url: str = None) -> Expense:
        self._check_category(user_id, category_id)
        expense = Expense(
            user_id=user_id,
            amount=amount,
            currency=currency,
            description=description,
            category_id=category_id,
            date=to_utc(date),
            tags=tags,
            receipt_url=receipt_url,
        )
        self.db_session.add(expense)
        self.db_session.commit()
        self.db_session.refresh(expense)
        logger.info(f"User {user_id} logged expense {expense.id} of {expense.amount} in category {category_id}")
        return expense

    def get_expenses(self, user_id: int, start_date: datetime.datetime = None, end_date: datetime.datetime = None, category_id: int = None):
        query = self.db_session.query(Expense).options(joinedload(Expense.category)).filter(Expense.user_id == user_id)
        if start_date is not None:
            query = query.filter(Expense.date >= to_utc(start_date))
        if end_date is not None:
            query = query.filter(Expense.date <= to_utc(end_date))
        if category_id is not None:
            query = query.filter(Expense.category_id == category_id)
        return query.order_by(Expense.date.desc(), Expense.id.desc()).all()

    def get_expense(self, user_id: int, expense_id: int):
        return self.db_session.query(Expense).filter(
            Expense.id == expense_id,
            Expense.user_id == user_id
        ).first()

    def update_expense(self, user_id: int, expense_id: int, amount: Decimal = None, description: str = None,
                       category_id: int = None, date: datetime.datetime = None, tags: list = None):
        expense = self.get_expense(user_id, expense_id)
        if not expense:
            return None

        if amount is not None:
            expense.amount = amount
        if description:
            expense.description = description
        if category_id is not None:
            self._check_category(user_id, category_id)
            expense.category_id = category_id
        if date is not None:
            expense.date = to_utc(date)
        if tags is not None:
            expense.tags = tags

        expense.updated_at = utc_now()
        self.db_session.commit()
        self.db_session.refresh(expense)
        return expense

    def delete_expense(self, user_id: int, expense_id: int) -> bool:
        expense = self.get_expense(user_id, expense_id)
        if not expense:
            return False
        self.db_session.delete(expense)
        self.db_session.commit()
        logger.info(f"User {user_id} deleted expense {expense_id}")
        return True

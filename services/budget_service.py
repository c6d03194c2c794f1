import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Protocol
from sqlalchemy.orm import Session, joinedload
from models import Budget, BudgetPeriod
from services.expense_service import ExpenseService
from services.exceptions import InvalidBudget, InvalidCategory
from utils.datetime_utils import to_utc, utc_now

logger = logging.getLogger(__name__)


class ExpenseStore(Protocol):
    def sum_expense_amounts(self, user_id: int, category_id: int, start_date: datetime, end_date: datetime) -> Decimal:
        ...


@dataclass(frozen=True)
class BudgetStatus:
    spent: Decimal
    remaining: Decimal
    percentage_used: Decimal


def effective_end(budget: Budget, now: datetime) -> datetime:
    """Upper bound of the budget's window: its end date, or `now` while it is open-ended."""
    return budget.end_date if budget.end_date is not None else now


def compute_status(budget: Budget, now: datetime, expense_store: ExpenseStore) -> BudgetStatus:
    """
    Works out how much of a budget has been spent at the instant `now`.

    Spending is every expense of the budget's user in the budget's category dated
    within [start_date, end_date or now], both ends inclusive. `remaining` goes
    negative on overspend and `percentage_used` is left unclamped; a zero budget
    reports 0%. Store failures propagate to the caller.
    """
    spent = expense_store.sum_expense_amounts(
        budget.user_id, budget.category_id, budget.start_date, effective_end(budget, now)
    )
    amount = Decimal(budget.amount)
    remaining = amount - spent
    percentage_used = (spent / amount) * 100 if amount > 0 else Decimal("0")
    return BudgetStatus(spent=spent, remaining=remaining, percentage_used=percentage_used)


class _MemoizedStore:
    """Reuses sums for identical (user, category, window) keys within one listing."""

    def __init__(self, store: ExpenseStore):
        self._store = store
        self._sums = {}

    def sum_expense_amounts(self, user_id, category_id, start_date, end_date):
        key = (user_id, category_id, to_utc(start_date), to_utc(end_date))
        if key not in self._sums:
            self._sums[key] = self._store.sum_expense_amounts(user_id, category_id, start_date, end_date)
        return self._sums[key]


class BudgetService:
    def __init__(self, db_session: Session):
        self.db_session = db_session
        self.expense_service = ExpenseService(db_session)

    def _validate(self, amount: Decimal, start_date: datetime, end_date: datetime):
        if amount is not None and amount < 0:
            raise InvalidBudget("Budget amount must be non-negative.")
        if end_date is not None and to_utc(end_date) < to_utc(start_date):
            raise InvalidBudget("Budget end date must not be earlier than its start date.")

    def get_budget_status(self, budget: Budget, now: datetime = None) -> BudgetStatus:
        if now is None:
            now = utc_now()
        return compute_status(budget, now, self.expense_service)

    def get_budgets(self, user_id: int):
        return self.db_session.query(Budget).options(joinedload(Budget.category)).filter(
            Budget.user_id == user_id
        ).order_by(Budget.start_date, Budget.id).all()

    def get_budget(self, user_id: int, budget_id: int):
        return self.db_session.query(Budget).options(joinedload(Budget.category)).filter(
            Budget.id == budget_id,
            Budget.user_id == user_id
        ).first()

    def get_budgets_with_status(self, user_id: int, now: datetime = None) -> list[tuple[Budget, BudgetStatus]]:
        if now is None:
            now = utc_now()
        store = _MemoizedStore(self.expense_service)
        return [(budget, compute_status(budget, now, store)) for budget in self.get_budgets(user_id)]

    def get_budget_with_status(self, user_id: int, budget_id: int, now: datetime = None):
        budget = self.get_budget(user_id, budget_id)
        if not budget:
            return None
        return budget, self.get_budget_status(budget, now)

    def create_budget(self, user_id: int, category_id: int, amount: Decimal, period: BudgetPeriod,
                      start_date: datetime, end_date: datetime = None) -> Budget:
        category = self.expense_service.category_service.get_visible_category(user_id, category_id)
        if not category:
            raise InvalidCategory("Invalid category")
        self._validate(amount, start_date, end_date)
        try:
            period = BudgetPeriod(period)
        except ValueError:
            raise InvalidBudget("Invalid period. Must be 'Weekly', 'Monthly' or 'Yearly'.")

        new_budget = Budget(
            user_id=user_id,
            category_id=category_id,
            amount=amount,
            period=period.value,
            start_date=to_utc(start_date),
            end_date=to_utc(end_date),
        )
        self.db_session.add(new_budget)
        self.db_session.commit()
        self.db_session.refresh(new_budget)
        logger.info(f"User {user_id} set a {new_budget.period} budget {new_budget.id} of {new_budget.amount} for category {category_id}")
        return new_budget

    def update_budget(self, user_id: int, budget_id: int, amount: Decimal = None, end_date: datetime = None):
        budget = self.get_budget(user_id, budget_id)
        if not budget:
            return None

        self._validate(amount, budget.start_date, end_date)
        if amount is not None:
            budget.amount = amount
        if end_date is not None:
            budget.end_date = to_utc(end_date)

        budget.updated_at = utc_now()
        self.db_session.commit()
        self.db_session.refresh(budget)
        logger.info(f"User {user_id} updated budget {budget_id}")
        return budget

    def delete_budget(self, user_id: int, budget_id: int) -> bool:
        budget = self.get_budget(user_id, budget_id)
        if not budget:
            return False
        self.db_session.delete(budget)
        self.db_session.commit()
        logger.info(f"User {user_id} deleted budget {budget_id}")
        return True

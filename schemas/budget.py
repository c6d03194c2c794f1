from decimal import Decimal
from typing import Optional
from pydantic import Field
from models import Budget, BudgetPeriod
from services.budget_service import BudgetStatus
from schemas.common import CamelModel, Money, UtcDatetime


class BudgetCreate(CamelModel):
    category_id: int
    amount: Decimal = Field(..., max_digits=18, decimal_places=2)
    period: BudgetPeriod
    start_date: UtcDatetime
    end_date: Optional[UtcDatetime] = None


class BudgetUpdate(CamelModel):
    amount: Optional[Decimal] = Field(None, max_digits=18, decimal_places=2)
    end_date: Optional[UtcDatetime] = None


class BudgetOut(CamelModel):
    id: int
    category_id: int
    category_name: str
    amount: Money
    period: BudgetPeriod
    start_date: UtcDatetime
    end_date: Optional[UtcDatetime] = None
    spent: Money
    remaining: Money
    percentage_used: Money
    created_at: UtcDatetime
    updated_at: UtcDatetime

    @classmethod
    def from_budget(cls, budget: Budget, status: BudgetStatus) -> "BudgetOut":
        return cls(
            id=budget.id,
            category_id=budget.category_id,
            category_name=budget.category.name,
            amount=budget.amount,
            period=budget.period,
            start_date=budget.start_date,
            end_date=budget.end_date,
            spent=status.spent,
            remaining=status.remaining,
            percentage_used=status.percentage_used,
            created_at=budget.created_at,
            updated_at=budget.updated_at,
        )

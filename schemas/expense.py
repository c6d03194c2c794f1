from decimal import Decimal
from typing import Optional
from pydantic import Field
from models import Expense
from schemas.common import CamelModel, Money, UtcDatetime


class ExpenseCreate(CamelModel):
    amount: Decimal = Field(..., max_digits=18, decimal_places=2)
    currency: str = Field("USD", min_length=3, max_length=3)
    description: str = Field("", max_length=500)
    category_id: int
    date: UtcDatetime
    tags: Optional[list[str]] = None
    receipt_url: Optional[str] = None


class ExpenseUpdate(CamelModel):
    amount: Optional[Decimal] = Field(None, max_digits=18, decimal_places=2)
    description: Optional[str] = Field(None, max_length=500)
    category_id: Optional[int] = None
    date: Optional[UtcDatetime] = None
    tags: Optional[list[str]] = None


class ExpenseOut(CamelModel):
    id: int
    amount: Money
    currency: str
    description: str
    category_id: int
    category_name: str
    category_icon: str
    category_color: str
    date: UtcDatetime
    receipt_url: Optional[str] = None
    tags: Optional[list[str]] = None
    created_at: UtcDatetime

    @classmethod
    def from_expense(cls, expense: Expense) -> "ExpenseOut":
        return cls(
            id=expense.id,
            amount=expense.amount,
            currency=expense.currency,
            description=expense.description,
            category_id=expense.category_id,
            category_name=expense.category.name,
            category_icon=expense.category.icon,
            category_color=expense.category.color,
            date=expense.date,
            receipt_url=expense.receipt_url,
            tags=expense.tags,
            created_at=expense.created_at,
        )

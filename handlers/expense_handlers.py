from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session
from models import User
from schemas import ExpenseCreate, ExpenseUpdate, ExpenseOut
from services import ExpenseService
from .dependencies import get_db, get_current_user

router = APIRouter(prefix="/api/expenses", tags=["expenses"])


@router.get("", response_model=list[ExpenseOut])
def list_expenses(
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    category_id: Optional[int] = Query(None, alias="categoryId"),
    user: User = Depends(get_current_user),
    db_session: Session = Depends(get_db),
):
    expenses = ExpenseService(db_session).get_expenses(user.id, start_date, end_date, category_id)
    return [ExpenseOut.from_expense(expense) for expense in expenses]


@router.get("/{expense_id}", response_model=ExpenseOut)
def get_expense(expense_id: int, user: User = Depends(get_current_user), db_session: Session = Depends(get_db)):
    expense = ExpenseService(db_session).get_expense(user.id, expense_id)
    if not expense:
        raise HTTPException(status_code=404, detail="Expense not found")
    return ExpenseOut.from_expense(expense)


@router.post("", response_model=ExpenseOut, status_code=201)
def create_expense(payload: ExpenseCreate, user: User = Depends(get_current_user), db_session: Session = Depends(get_db)):
    expense = ExpenseService(db_session).add_expense(
        user.id,
        amount=payload.amount,
        category_id=payload.category_id,
        date=payload.date,
        description=payload.description,
        currency=payload.currency,
        tags=payload.tags,
        receipt_url=payload.receipt_url,
    )
    return ExpenseOut.from_expense(expense)


@router.put("/{expense_id}", response_model=ExpenseOut)
def update_expense(expense_id: int, payload: ExpenseUpdate, user: User = Depends(get_current_user), db_session: Session = Depends(get_db)):
    expense = ExpenseService(db_session).update_expense(
        user.id,
        expense_id,
        amount=payload.amount,
        description=payload.description,
        category_id=payload.category_id,
        date=payload.date,
        tags=payload.tags,
    )
    if not expense:
        raise HTTPException(status_code=404, detail="Expense not found")
    return ExpenseOut.from_expense(expense)


@router.delete("/{expense_id}", status_code=204)
def delete_expense(expense_id: int, user: User = Depends(get_current_user), db_session: Session = Depends(get_db)):
    if not ExpenseService(db_session).delete_expense(user.id, expense_id):
        raise HTTPException(status_code=404, detail="Expense not found")
    return Response(status_code=204)

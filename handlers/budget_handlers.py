from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session
from models import User
from schemas import BudgetCreate, BudgetUpdate, BudgetOut
from services import BudgetService
from .dependencies import get_db, get_current_user

router = APIRouter(prefix="/api/budgets", tags=["budgets"])

# Every read recomputes spending; statuses are never stored


@router.get("", response_model=list[BudgetOut])
def list_budgets(user: User = Depends(get_current_user), db_session: Session = Depends(get_db)):
    budget_service = BudgetService(db_session)
    return [BudgetOut.from_budget(budget, status) for budget, status in budget_service.get_budgets_with_status(user.id)]


@router.get("/{budget_id}", response_model=BudgetOut)
def get_budget(budget_id: int, user: User = Depends(get_current_user), db_session: Session = Depends(get_db)):
    result = BudgetService(db_session).get_budget_with_status(user.id, budget_id)
    if not result:
        raise HTTPException(status_code=404, detail="Budget not found")
    budget, status = result
    return BudgetOut.from_budget(budget, status)


@router.post("", response_model=BudgetOut, status_code=201)
def create_budget(payload: BudgetCreate, user: User = Depends(get_current_user), db_session: Session = Depends(get_db)):
    budget_service = BudgetService(db_session)
    budget = budget_service.create_budget(
        user.id,
        category_id=payload.category_id,
        amount=payload.amount,
        period=payload.period,
        start_date=payload.start_date,
        end_date=payload.end_date,
    )
    return BudgetOut.from_budget(budget, budget_service.get_budget_status(budget))


@router.put("/{budget_id}", response_model=BudgetOut)
def update_budget(budget_id: int, payload: BudgetUpdate, user: User = Depends(get_current_user), db_session: Session = Depends(get_db)):
    budget_service = BudgetService(db_session)
    budget = budget_service.update_budget(user.id, budget_id, amount=payload.amount, end_date=payload.end_date)
    if not budget:
        raise HTTPException(status_code=404, detail="Budget not found")
    return BudgetOut.from_budget(budget, budget_service.get_budget_status(budget))


@router.delete("/{budget_id}", status_code=204)
def delete_budget(budget_id: int, user: User = Depends(get_current_user), db_session: Session = Depends(get_db)):
    if not BudgetService(db_session).delete_budget(user.id, budget_id):
        raise HTTPException(status_code=404, detail="Budget not found")
    return Response(status_code=204)

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session
from models import User
from schemas import CategoryCreate, CategoryUpdate, CategoryOut
from services import CategoryService
from .dependencies import get_db, get_current_user

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=list[CategoryOut])
def list_categories(user: User = Depends(get_current_user), db_session: Session = Depends(get_db)):
    return CategoryService(db_session).get_categories(user.id)


@router.post("", response_model=CategoryOut, status_code=201)
def create_category(payload: CategoryCreate, user: User = Depends(get_current_user), db_session: Session = Depends(get_db)):
    category_service = CategoryService(db_session)
    return category_service.add_custom_category(user.id, payload.name, payload.icon, payload.color)


@router.put("/{category_id}", response_model=CategoryOut)
def update_category(category_id: int, payload: CategoryUpdate, user: User = Depends(get_current_user), db_session: Session = Depends(get_db)):
    category = CategoryService(db_session).update_category(
        user.id, category_id, name=payload.name, icon=payload.icon, color=payload.color
    )
    if not category:
        raise HTTPException(status_code=404, detail="Category not found or cannot be modified")
    return category


@router.delete("/{category_id}", status_code=204)
def delete_category(category_id: int, user: User = Depends(get_current_user), db_session: Session = Depends(get_db)):
    if not CategoryService(db_session).delete_category(user.id, category_id):
        raise HTTPException(status_code=404, detail="Category not found or cannot be deleted")
    return Response(status_code=204)

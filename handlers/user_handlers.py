from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from models import User
from schemas import UserCreate, UserOut
from services import UserService
from .dependencies import get_db, get_current_user

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserOut, status_code=201)
def create_user(payload: UserCreate, db_session: Session = Depends(get_db)):
    user_service = UserService(db_session)
    return user_service.create_user(payload.email, payload.first_name, payload.last_name)


@router.get("/me", response_model=UserOut)
def get_me(user: User = Depends(get_current_user)):
    return user

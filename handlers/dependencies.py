from typing import Optional
from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session
from models import SessionLocal, User
from services import UserService


def get_db():
    db_session = SessionLocal()
    try:
        yield db_session
    finally:
        db_session.close()


def get_current_user(x_user_id: Optional[str] = Header(default=None), db_session: Session = Depends(get_db)) -> User:
    """Resolves the user id asserted by the upstream identity provider."""
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    try:
        user_id = int(x_user_id)
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid user identifier")

    user = UserService(db_session).get_user(user_id)
    if not user:
        raise HTTPException(status_code=401, detail="Unknown user")
    return user

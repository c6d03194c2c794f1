from sqlalchemy.orm import Session
from models import User
from services.exceptions import DuplicateUser
import logging

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, db_session: Session):
        self.db_session = db_session

    def create_user(self, email: str, first_name: str, last_name: str) -> User:
        email = email.strip().lower()
        if self.db_session.query(User).filter(User.email == email).first():
            raise DuplicateUser(f"A user with email '{email}' already exists.")

        user = User(email=email, first_name=first_name, last_name=last_name)
        self.db_session.add(user)
        self.db_session.commit()
        self.db_session.refresh(user)
        logger.info(f"Created user {user.id} ({user.email})")
        return user

    def get_user(self, user_id: int) -> User:
        return self.db_session.query(User).filter(User.id == user_id).first()

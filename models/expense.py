from sqlalchemy import Column, Integer, String, ForeignKey, Numeric, DateTime, Boolean, JSON
from sqlalchemy.orm import relationship, Session
from models.base import Base
import datetime
from datetime import timezone

# (name, icon, color) of the categories shared by every user
SYSTEM_CATEGORIES = [
    ("Food & Dining", "🍔", "#FF6B6B"),
    ("Transportation", "🚗", "#4ECDC4"),
    ("Shopping", "🛍️", "#45B7D1"),
    ("Entertainment", "🎬", "#FFA07A"),
    ("Healthcare", "⚕️", "#98D8C8"),
    ("Bills & Utilities", "💡", "#F7DC6F"),
    ("Education", "📚", "#BB8FCE"),
    ("Travel", "✈️", "#85C1E2"),
    ("Other", "📦", "#95A5A6"),
]

class Expense(Base):
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Numeric(18, 2), nullable=False)
    currency = Column(String(3), nullable=False, default="USD")
    description = Column(String(500), nullable=False, default="")
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False, index=True)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    receipt_url = Column(String, nullable=True)
    tags = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.datetime.now(timezone.utc))
    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.datetime.now(timezone.utc))

    user = relationship("User", back_populates="expenses")
    category = relationship("Category", back_populates="expenses")

    def __repr__(self):
        return f"<Expense(user_id={self.user_id}, amount={self.amount}, category_id={self.category_id}, date={self.date})>"


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True) # Null for system categories
    name = Column(String(100), nullable=False) # Not unique globally, unique per user or among system ones
    icon = Column(String(50), nullable=False, default="")
    color = Column(String(7), nullable=False, default="#000000")
    is_system = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.datetime.now(timezone.utc))

    user = relationship("User", back_populates="categories")
    expenses = relationship("Expense", back_populates="category")
    budgets = relationship("Budget", back_populates="category")

    def __repr__(self):
        return f"<Category(name='{self.name}', user_id={self.user_id}, is_system={self.is_system})>"


def add_default_categories(db_session: Session):
    for name, icon, color in SYSTEM_CATEGORIES:
        if not db_session.query(Category).filter_by(name=name, is_system=True).first():
            category = Category(name=name, icon=icon, color=color, is_system=True, user_id=None)
            db_session.add(category)
    db_session.commit()

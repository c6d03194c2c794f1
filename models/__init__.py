from .base import Base, SessionLocal, engine, create_all_tables, drop_all_tables
from .user import User
from .expense import Expense, Category, SYSTEM_CATEGORIES, add_default_categories
from .budget import Budget, BudgetPeriod

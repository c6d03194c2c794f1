from .user import UserCreate, UserOut
from .category import CategoryCreate, CategoryUpdate, CategoryOut
from .expense import ExpenseCreate, ExpenseUpdate, ExpenseOut
from .budget import BudgetCreate, BudgetUpdate, BudgetOut

from .exceptions import StoreUnavailable, InvalidBudget, InvalidCategory, DuplicateCategory, CategoryInUse, DuplicateUser
from .user_service import UserService
from .category_service import CategoryService, is_category_visible
from .expense_service import ExpenseService
from .budget_service import BudgetService, BudgetStatus, compute_status

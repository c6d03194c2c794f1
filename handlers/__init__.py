from .dependencies import get_db, get_current_user
from .user_handlers import router as user_router
from .category_handlers import router as category_router
from .expense_handlers import router as expense_router
from .budget_handlers import router as budget_router

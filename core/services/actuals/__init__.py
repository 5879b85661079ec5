from .categorize import CATEGORY_KEYWORDS, suggest_expense_category
from .service import ActualsService

__all__ = ["ActualsService", "CATEGORY_KEYWORDS", "suggest_expense_category"]

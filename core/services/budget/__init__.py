from .service import BudgetService

__all__ = ["BudgetService"]

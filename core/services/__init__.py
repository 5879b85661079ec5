from .actuals import ActualsService
from .budget import BudgetService
from .finance import FinanceService
from .payment import PaymentService
from .project import ProjectService
from .staff import StaffService

__all__ = [
    "ProjectService",
    "StaffService",
    "BudgetService",
    "ActualsService",
    "PaymentService",
    "FinanceService",
]

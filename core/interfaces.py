# core/interfaces.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from core.domain import (
    BudgetExpense,
    BudgetLabor,
    Expense,
    Payment,
    Project,
    Staff,
    TimeLog,
)


class ProjectRepository(ABC):
    @abstractmethod
    def add(self, project: Project) -> None: ...

    @abstractmethod
    def update(self, project: Project) -> None: ...

    @abstractmethod
    def delete(self, project_id: str) -> None: ...

    @abstractmethod
    def get(self, project_id: str) -> Optional[Project]: ...

    @abstractmethod
    def list_all(self) -> List[Project]: ...


class StaffRepository(ABC):
    @abstractmethod
    def add(self, staff: Staff) -> None: ...

    @abstractmethod
    def delete(self, staff_id: str) -> None: ...

    @abstractmethod
    def get(self, staff_id: str) -> Optional[Staff]: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[Staff]: ...

    @abstractmethod
    def delete_by_project(self, project_id: str) -> None: ...


class BudgetLaborRepository(ABC):
    @abstractmethod
    def add(self, line: BudgetLabor) -> None: ...

    @abstractmethod
    def delete(self, line_id: str) -> None: ...

    @abstractmethod
    def get(self, line_id: str) -> Optional[BudgetLabor]: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[BudgetLabor]: ...

    @abstractmethod
    def delete_by_project(self, project_id: str) -> None: ...


class BudgetExpenseRepository(ABC):
    @abstractmethod
    def add(self, line: BudgetExpense) -> None: ...

    @abstractmethod
    def delete(self, line_id: str) -> None: ...

    @abstractmethod
    def get(self, line_id: str) -> Optional[BudgetExpense]: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[BudgetExpense]: ...

    @abstractmethod
    def delete_by_project(self, project_id: str) -> None: ...


class TimeLogRepository(ABC):
    @abstractmethod
    def add(self, log: TimeLog) -> None: ...

    @abstractmethod
    def delete(self, log_id: str) -> None: ...

    @abstractmethod
    def get(self, log_id: str) -> Optional[TimeLog]: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[TimeLog]: ...

    @abstractmethod
    def delete_by_project(self, project_id: str) -> None: ...


class ExpenseRepository(ABC):
    @abstractmethod
    def add(self, expense: Expense) -> None: ...

    @abstractmethod
    def delete(self, expense_id: str) -> None: ...

    @abstractmethod
    def get(self, expense_id: str) -> Optional[Expense]: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[Expense]: ...

    @abstractmethod
    def delete_by_project(self, project_id: str) -> None: ...


class PaymentRepository(ABC):
    @abstractmethod
    def add(self, payment: Payment) -> None: ...

    @abstractmethod
    def update(self, payment: Payment) -> None: ...

    @abstractmethod
    def delete(self, payment_id: str) -> None: ...

    @abstractmethod
    def get(self, payment_id: str) -> Optional[Payment]: ...

    @abstractmethod
    def list_by_project(self, project_id: str) -> List[Payment]: ...

    @abstractmethod
    def delete_by_project(self, project_id: str) -> None: ...


__all__ = [
    "ProjectRepository",
    "StaffRepository",
    "BudgetLaborRepository",
    "BudgetExpenseRepository",
    "TimeLogRepository",
    "ExpenseRepository",
    "PaymentRepository",
]

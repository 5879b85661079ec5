from __future__ import annotations

from datetime import date

from core.exceptions import ValidationError
from core.interfaces import ProjectRepository


class ProjectValidationMixin:
    _project_repo: ProjectRepository

    def _validate_project_name(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Project name cannot be empty.", code="PROJECT_NAME_EMPTY")

    def _validate_project_code(self, code: str, *, exclude_id: str | None = None) -> None:
        if not code or not code.strip():
            raise ValidationError("Project code cannot be empty.", code="PROJECT_CODE_EMPTY")

        for project in self._project_repo.list_all():
            if project.id == exclude_id:
                continue
            if project.code.strip().lower() == code.strip().lower():
                raise ValidationError("A project with this code already exists.", code="PROJECT_CODE_DUPLICATE")

    def _validate_date_range(self, start_date: date, end_date: date) -> None:
        if end_date < start_date:
            raise ValidationError("Project end date cannot be before start date.", code="PROJECT_INVALID_DATES")


__all__ = ["ProjectValidationMixin"]

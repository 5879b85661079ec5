from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, List

from sqlalchemy.orm import Session

from core.domain import Staff, StaffLocation
from core.events.domain_events import domain_events
from core.exceptions import NotFoundError, ValidationError
from core.interfaces import ProjectRepository, StaffRepository
from core.services.common.base import ServiceBase
from core.services.common.parsing import parse_enum, parse_positive
from core.services.finance.analytics import loaded_rate

logger = logging.getLogger(__name__)


class StaffService(ServiceBase):
    def __init__(
        self,
        session: Session,
        staff_repo: StaffRepository,
        project_repo: ProjectRepository,
    ):
        super().__init__(session)
        self._staff_repo: StaffRepository = staff_repo
        self._project_repo: ProjectRepository = project_repo

    def add_staff(
        self,
        project_id: str,
        name: str,
        base_rate: Any,
        role: str = "",
        location: StaffLocation | str = StaffLocation.CAIRO,
    ) -> Staff:
        if not self._project_repo.get(project_id):
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")
        if not name or not name.strip():
            raise ValidationError("Staff name cannot be empty.", code="STAFF_NAME_EMPTY")

        staff = Staff.create(
            project_id=project_id,
            name=name.strip(),
            role=(role or "").strip(),
            base_rate=parse_positive(base_rate, field="base_rate"),
            location=parse_enum(StaffLocation, location, field="location"),
        )
        with self.unit_of_work("staff.add"):
            self._staff_repo.add(staff)
        logger.info("Added staff %s (%s) to project %s", staff.name, staff.location.value, project_id)
        domain_events.staff_changed.emit(project_id)
        return staff

    def delete_staff(self, staff_id: str) -> None:
        """Remove a staff member; budget lines and time logs keep pointing at the old id."""
        staff = self._staff_repo.get(staff_id)
        if not staff:
            raise NotFoundError("Staff member not found.", code="STAFF_NOT_FOUND")
        with self.unit_of_work("staff.delete"):
            self._staff_repo.delete(staff_id)
        domain_events.staff_changed.emit(staff.project_id)

    def list_staff(self, project_id: str) -> List[Staff]:
        return self._staff_repo.list_by_project(project_id)

    def loaded_rate(self, staff_id: str) -> Decimal:
        staff = self._staff_repo.get(staff_id)
        if not staff:
            raise NotFoundError("Staff member not found.", code="STAFF_NOT_FOUND")
        project = self._project_repo.get(staff.project_id)
        if not project:
            raise NotFoundError("Project not found.", code="PROJECT_NOT_FOUND")
        return loaded_rate(staff, project)


__all__ = ["StaffService"]

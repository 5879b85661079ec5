from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.domain import Staff
from core.interfaces import StaffRepository
from infra.db.models import StaffORM
from infra.db.staff.mapper import staff_from_orm, staff_to_orm


class SqlAlchemyStaffRepository(StaffRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, staff: Staff) -> None:
        self.session.add(staff_to_orm(staff))

    def delete(self, staff_id: str) -> None:
        self.session.query(StaffORM).filter_by(id=staff_id).delete()

    def get(self, staff_id: str) -> Optional[Staff]:
        obj = self.session.get(StaffORM, staff_id)
        return staff_from_orm(obj) if obj else None

    def list_by_project(self, project_id: str) -> List[Staff]:
        stmt = select(StaffORM).where(StaffORM.project_id == project_id).order_by(StaffORM.name)
        rows = self.session.execute(stmt).scalars().all()
        return [staff_from_orm(row) for row in rows]

    def delete_by_project(self, project_id: str) -> None:
        self.session.query(StaffORM).filter_by(project_id=project_id).delete()


__all__ = ["SqlAlchemyStaffRepository"]

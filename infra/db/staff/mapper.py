from __future__ import annotations

from core.domain import Staff
from infra.db.models import StaffORM


def staff_to_orm(staff: Staff) -> StaffORM:
    return StaffORM(
        id=staff.id,
        project_id=staff.project_id,
        name=staff.name,
        role=staff.role,
        base_rate=staff.base_rate,
        location=staff.location,
    )


def staff_from_orm(obj: StaffORM) -> Staff:
    return Staff(
        id=obj.id,
        project_id=obj.project_id,
        name=obj.name,
        role=obj.role or "",
        base_rate=obj.base_rate,
        location=obj.location,
    )


__all__ = ["staff_to_orm", "staff_from_orm"]

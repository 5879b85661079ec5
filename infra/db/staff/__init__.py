from infra.db.staff.mapper import staff_from_orm, staff_to_orm
from infra.db.staff.repository import SqlAlchemyStaffRepository

__all__ = [
    "staff_to_orm",
    "staff_from_orm",
    "SqlAlchemyStaffRepository",
]

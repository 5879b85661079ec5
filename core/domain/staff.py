from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from core.domain.enums import StaffLocation
from core.domain.identifiers import generate_id


@dataclass
class Staff:
    id: str
    project_id: str
    name: str
    base_rate: Decimal
    role: str = ""
    location: StaffLocation = StaffLocation.CAIRO

    @staticmethod
    def create(
        project_id: str,
        name: str,
        base_rate: Decimal,
        role: str = "",
        location: StaffLocation = StaffLocation.CAIRO,
    ) -> "Staff":
        return Staff(
            id=generate_id(),
            project_id=project_id,
            name=name,
            base_rate=base_rate,
            role=role,
            location=location,
        )


__all__ = ["Staff"]

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from core.domain.identifiers import generate_id


@dataclass
class Project:
    id: str
    name: str
    code: str
    total_contract_value: Decimal
    start_date: date
    end_date: date
    manager: Optional[str] = None
    coordinator: Optional[str] = None
    overhead_multiplier: Decimal = Decimal("2.5")
    target_margin: Decimal = Decimal("20")
    currency: str = "SAR"
    stoppage_days: int = 0
    percent_complete: Decimal = Decimal("0")
    is_paused: bool = False
    pause_start_date: Optional[date] = None
    version: int = 1

    @staticmethod
    def create(
        name: str,
        code: str,
        total_contract_value: Decimal,
        start_date: date,
        end_date: date,
        **extra,
    ) -> "Project":
        return Project(
            id=generate_id(),
            name=name,
            code=code,
            total_contract_value=total_contract_value,
            start_date=start_date,
            end_date=end_date,
            **extra,
        )


__all__ = ["Project"]

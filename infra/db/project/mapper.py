from __future__ import annotations

from core.domain import Project
from infra.db.models import ProjectORM


def project_to_orm(project: Project) -> ProjectORM:
    return ProjectORM(
        id=project.id,
        name=project.name,
        code=project.code,
        total_contract_value=project.total_contract_value,
        start_date=project.start_date,
        end_date=project.end_date,
        manager=project.manager,
        coordinator=project.coordinator,
        overhead_multiplier=project.overhead_multiplier,
        target_margin=project.target_margin,
        currency=project.currency,
        stoppage_days=project.stoppage_days,
        percent_complete=project.percent_complete,
        is_paused=project.is_paused,
        pause_start_date=project.pause_start_date,
        version=getattr(project, "version", 1),
    )


def project_from_orm(obj: ProjectORM) -> Project:
    return Project(
        id=obj.id,
        name=obj.name,
        code=obj.code,
        total_contract_value=obj.total_contract_value,
        start_date=obj.start_date,
        end_date=obj.end_date,
        manager=obj.manager,
        coordinator=obj.coordinator,
        overhead_multiplier=obj.overhead_multiplier,
        target_margin=obj.target_margin,
        currency=obj.currency,
        stoppage_days=obj.stoppage_days or 0,
        percent_complete=obj.percent_complete,
        is_paused=bool(obj.is_paused),
        pause_start_date=obj.pause_start_date,
        version=getattr(obj, "version", 1),
    )


__all__ = ["project_to_orm", "project_from_orm"]

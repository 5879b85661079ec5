from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.domain import Project
from core.interfaces import ProjectRepository
from infra.db.models import ProjectORM
from infra.db.optimistic import update_with_version_check
from infra.db.project.mapper import project_from_orm, project_to_orm


class SqlAlchemyProjectRepository(ProjectRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, project: Project) -> None:
        self.session.add(project_to_orm(project))

    def update(self, project: Project) -> None:
        project.version = update_with_version_check(
            self.session,
            ProjectORM,
            project.id,
            getattr(project, "version", 1),
            {
                "name": project.name,
                "code": project.code,
                "total_contract_value": project.total_contract_value,
                "start_date": project.start_date,
                "end_date": project.end_date,
                "manager": project.manager,
                "coordinator": project.coordinator,
                "overhead_multiplier": project.overhead_multiplier,
                "target_margin": project.target_margin,
                "currency": project.currency,
                "stoppage_days": project.stoppage_days,
                "percent_complete": project.percent_complete,
                "is_paused": project.is_paused,
                "pause_start_date": project.pause_start_date,
            },
            not_found_message="Project not found.",
            not_found_code="PROJECT_NOT_FOUND",
            stale_message="Project was updated by another user.",
        )

    def delete(self, project_id: str) -> None:
        self.session.query(ProjectORM).filter_by(id=project_id).delete()

    def get(self, project_id: str) -> Optional[Project]:
        obj = self.session.get(ProjectORM, project_id)
        return project_from_orm(obj) if obj else None

    def list_all(self) -> List[Project]:
        stmt = select(ProjectORM).order_by(ProjectORM.start_date, ProjectORM.name)
        rows = self.session.execute(stmt).scalars().all()
        return [project_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyProjectRepository"]

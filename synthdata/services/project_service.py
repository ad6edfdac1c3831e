# services/project_service.py
from typing import List, Optional
from loguru import logger
from sqlalchemy.orm import Session

from synthdata.models.project import Project
from synthdata.schemas.project import ProjectCreate
from synthdata.utils.metrics import metrics_manager


class ProjectService:

    def __init__(self, db: Session):
        self.db = db

    def list_projects(self, user_id: str) -> List[Project]:
        """Returns the user's projects, newest first."""
        return (
            self.db.query(Project)
            .filter(Project.user_id == user_id)
            .order_by(Project.created_at.desc())
            .all()
        )

    def get_project(self, user_id: str, project_id: str) -> Optional[Project]:
        return (
            self.db.query(Project)
            .filter(Project.id == project_id, Project.user_id == user_id)
            .first()
        )

    def create_project(self, user_id: str, payload: ProjectCreate) -> Project:
        project = Project(
            user_id=user_id,
            name=payload.name,
            description=payload.description,
            industry=payload.industry.value,
        )
        self.db.add(project)
        self.db.commit()
        self.db.refresh(project)
        metrics_manager.PROJECTS_CREATED.inc()
        logger.info(f"Project created: {project.name} ({project.id}) for user {user_id}")
        return project

# dependencies.py
from fastapi import Depends
from sqlalchemy.orm import Session
from typing import Generator

from synthdata.services.dashboard_service import DashboardService
from synthdata.services.dataset_service import DatasetService
from synthdata.services.generation_service import GenerationService
from synthdata.services.project_service import ProjectService
from synthdata.services.template_service import TemplateService
from synthdata.utils.database import DatabaseUtils


# Dependency to get the SQLAlchemy session
def get_db() -> Generator[Session, None, None]:
    """Yields a database session."""
    yield from DatabaseUtils.get_db()


def get_project_service(db: Session = Depends(get_db)) -> ProjectService:
    return ProjectService(db)


def get_dataset_service(db: Session = Depends(get_db)) -> DatasetService:
    return DatasetService(db)


def get_template_service(db: Session = Depends(get_db)) -> TemplateService:
    return TemplateService(db)


def get_generation_service(db: Session = Depends(get_db)) -> GenerationService:
    return GenerationService(db)


def get_dashboard_service(db: Session = Depends(get_db)) -> DashboardService:
    return DashboardService(db)

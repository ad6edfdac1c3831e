# services/dashboard_service.py
from sqlalchemy.orm import Session

from synthdata.config import settings
from synthdata.models.dataset import Dataset
from synthdata.models.generation import SyntheticGeneration
from synthdata.models.project import Project
from synthdata.schemas.dashboard import DashboardStats


class DashboardService:

    def __init__(self, db: Session, shared_dataset_count: bool = settings.STATS_SHARED_DATASET_COUNT):
        self.db = db
        self.shared_dataset_count = shared_dataset_count

    def count_datasets(self, user_id: str) -> int:
        query = self.db.query(Dataset)
        if not self.shared_dataset_count:
            query = query.join(Project, Dataset.project_id == Project.id).filter(Project.user_id == user_id)
        return query.count()

    def stats(self, user_id: str) -> DashboardStats:
        total_projects = self.db.query(Project).filter(Project.user_id == user_id).count()
        total_generations = (
            self.db.query(SyntheticGeneration)
            .filter(SyntheticGeneration.user_id == user_id)
            .count()
        )
        return DashboardStats(
            total_projects=total_projects,
            total_datasets=self.count_datasets(user_id),
            total_generations=total_generations,
            recent_activity=total_generations,
        )

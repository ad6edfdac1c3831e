from pydantic import BaseModel


class DashboardStats(BaseModel):
    total_projects: int = 0
    total_datasets: int = 0
    total_generations: int = 0
    recent_activity: int = 0

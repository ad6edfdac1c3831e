# synthdata/routers/dashboard.py
from fastapi import APIRouter, Depends

from synthdata.dependencies import get_dashboard_service
from synthdata.models.auth import User
from synthdata.schemas.dashboard import DashboardStats
from synthdata.services.dashboard_service import DashboardService
from synthdata.services.security import get_current_user

router = APIRouter()


@router.get("/stats", response_model=DashboardStats, summary="Aggregate counts for the dashboard header")
def dashboard_stats_endpoint(
    user: User = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
):
    return service.stats(user.id)

from fastapi import APIRouter, Depends
from teamfeed.core.dependencies import get_feed_store, get_optional_user
from teamfeed.database.store import FeedStore
from teamfeed.modules.dashboard.schemas import DashboardResponse
from teamfeed.modules.dashboard.service import DashboardService
from typing import Dict, Optional

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_dashboard_service(store: FeedStore = Depends(get_feed_store)) -> DashboardService:
    return DashboardService(store)


@router.get("", response_model=DashboardResponse)
def get_dashboard(
    user_data: Optional[Dict] = Depends(get_optional_user),
    service: DashboardService = Depends(get_dashboard_service)
):
    """The caller's team, its posts, and other teams to discover"""
    return service.get_dashboard(user_data)

from fastapi import APIRouter, Depends
from teamfeed.core.dependencies import get_feed_store, get_optional_user
from teamfeed.database.store import FeedStore
from teamfeed.modules.profiles.schemas import MyTeamResponse
from teamfeed.modules.profiles.service import ProfileService
from typing import Dict, Optional

router = APIRouter(prefix="/profiles", tags=["profiles"])


def get_profile_service(store: FeedStore = Depends(get_feed_store)) -> ProfileService:
    return ProfileService(store)


@router.get("/me", response_model=MyTeamResponse)
def get_my_team(
    user_data: Optional[Dict] = Depends(get_optional_user),
    service: ProfileService = Depends(get_profile_service)
):
    """Get the caller's team"""
    return service.get_my_team(user_data)

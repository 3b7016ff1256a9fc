from fastapi import APIRouter, Depends
from teamfeed.core.dependencies import get_feed_store, get_optional_user
from teamfeed.database.store import FeedStore
from teamfeed.modules.follows.schemas import FollowStatusResponse, FollowingIdsResponse
from teamfeed.modules.follows.service import FollowService
from typing import Dict, Optional

router = APIRouter(prefix="/follows", tags=["follows"])


def get_follow_service(store: FeedStore = Depends(get_feed_store)) -> FollowService:
    return FollowService(store)


@router.get("", response_model=FollowingIdsResponse)
def list_following(
    user_data: Optional[Dict] = Depends(get_optional_user),
    service: FollowService = Depends(get_follow_service)
):
    """Team IDs the caller's team follows (empty for anonymous callers)"""
    return FollowingIdsResponse(team_ids=sorted(service.following_ids(user_data)))


@router.get("/{team_id}", response_model=FollowStatusResponse)
def get_follow_status(
    team_id: str,
    user_data: Optional[Dict] = Depends(get_optional_user),
    service: FollowService = Depends(get_follow_service)
):
    """Whether the caller's team follows ``team_id``"""
    return FollowStatusResponse(team_id=team_id, is_following=service.is_following(user_data, team_id))


@router.post("/{team_id}", status_code=204)
def follow_team(
    team_id: str,
    user_data: Optional[Dict] = Depends(get_optional_user),
    service: FollowService = Depends(get_follow_service)
):
    """Follow a team. 409 if already following, 400 for your own team."""
    service.follow(user_data, team_id)
    return None


@router.delete("/{team_id}", status_code=204)
def unfollow_team(
    team_id: str,
    user_data: Optional[Dict] = Depends(get_optional_user),
    service: FollowService = Depends(get_follow_service)
):
    """Unfollow a team. 204 whether or not the relationship existed."""
    service.unfollow(user_data, team_id)
    return None

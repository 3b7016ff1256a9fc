from fastapi import APIRouter, Depends, Query
from teamfeed.config import settings
from teamfeed.core.dependencies import get_feed_store, get_optional_user
from teamfeed.database.store import FeedStore
from teamfeed.modules.feed.routes import get_feed_service
from teamfeed.modules.feed.service import FeedService
from teamfeed.modules.follows.routes import get_follow_service
from teamfeed.modules.follows.service import FollowService
from teamfeed.modules.posts.schemas import FeedPostResponse
from teamfeed.modules.teams.schemas import CountResponse, TeamDetailResponse, TeamResponse
from teamfeed.modules.teams.service import TeamService
from typing import Dict, List, Optional

router = APIRouter(prefix="/teams", tags=["teams"])


def get_team_service(store: FeedStore = Depends(get_feed_store)) -> TeamService:
    return TeamService(store)


@router.get("", response_model=List[TeamResponse])
def list_teams(service: TeamService = Depends(get_team_service)):
    """List all teams, newest first"""
    return service.all_teams()


@router.get("/{team_id}", response_model=TeamDetailResponse)
def get_team(
    team_id: str,
    user_data: Optional[Dict] = Depends(get_optional_user),
    service: TeamService = Depends(get_team_service)
):
    """Team page: team, follower/following counts, post count and the caller's relation to it"""
    return service.get_team_detail(team_id, user_data)


@router.get("/{team_id}/posts", response_model=List[FeedPostResponse])
def list_team_posts(
    team_id: str,
    limit: int = Query(settings.feed_default_limit, ge=1, le=settings.feed_max_limit),
    service: FeedService = Depends(get_feed_service)
):
    """Posts by one team, newest first"""
    return service.team_feed(team_id, limit)


@router.get("/{team_id}/followers/count", response_model=CountResponse)
def follower_count(
    team_id: str,
    service: FollowService = Depends(get_follow_service)
):
    return CountResponse(team_id=team_id, count=service.follower_count(team_id))


@router.get("/{team_id}/following/count", response_model=CountResponse)
def following_count(
    team_id: str,
    service: FollowService = Depends(get_follow_service)
):
    return CountResponse(team_id=team_id, count=service.following_count(team_id))

from fastapi import APIRouter, Depends, Query
from teamfeed.config import settings
from teamfeed.core.dependencies import get_feed_store
from teamfeed.database.store import FeedStore
from teamfeed.modules.posts.schemas import FeedPostResponse
from teamfeed.modules.feed.service import FeedService
from typing import List

router = APIRouter(prefix="/feed", tags=["feed"])


def get_feed_service(store: FeedStore = Depends(get_feed_store)) -> FeedService:
    return FeedService(store)


@router.get("", response_model=List[FeedPostResponse])
def global_feed(
    limit: int = Query(settings.feed_default_limit, ge=1, le=settings.feed_max_limit),
    service: FeedService = Depends(get_feed_service)
):
    """All posts from all teams, newest first (public)"""
    return service.global_feed(limit)

from fastapi import APIRouter, Depends
from teamfeed.core.dependencies import get_feed_store, get_optional_user
from teamfeed.database.store import FeedStore
from teamfeed.modules.posts.schemas import PostCreate, PostResponse
from teamfeed.modules.posts.service import PostService
from typing import Dict, Optional

router = APIRouter(prefix="/posts", tags=["posts"])


def get_post_service(store: FeedStore = Depends(get_feed_store)) -> PostService:
    return PostService(store)


@router.post("", response_model=PostResponse, status_code=201)
def create_post(
    post_data: PostCreate,
    user_data: Optional[Dict] = Depends(get_optional_user),
    service: PostService = Depends(get_post_service)
):
    """Create a post on behalf of the caller's team (team is never taken from the request)"""
    return service.create_post(user_data, post_data.content)

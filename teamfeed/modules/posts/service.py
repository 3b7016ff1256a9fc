import logging
from typing import Any, Dict, Optional

from teamfeed.config import settings
from teamfeed.core.exceptions import ContentTooLongError, EmptyContentError
from teamfeed.database.store import FeedStore
from teamfeed.modules.posts.schemas import PostResponse
from teamfeed.modules.profiles.service import ProfileService

logger = logging.getLogger(__name__)


class PostService:
    def __init__(self, store: FeedStore, profiles: ProfileService = None, max_length: int = None):
        self.store = store
        self.profiles = profiles or ProfileService(store)
        self.max_length = max_length if max_length is not None else settings.post_max_length

    def validate_content(self, raw_content: Optional[str]) -> str:
        """Return the trimmed content or raise the first failing rule.

        The length limit applies to the untrimmed input so it agrees with the
        character counter shown while typing.
        """
        content = (raw_content or "").strip()
        if not content:
            raise EmptyContentError()
        if len(raw_content) > self.max_length:
            raise ContentTooLongError(f"Post content cannot exceed {self.max_length} characters")
        return content

    def create_post(self, user_data: Optional[Dict[str, Any]], raw_content: Optional[str]) -> PostResponse:
        """Create a post on behalf of the caller's team"""
        content = self.validate_content(raw_content)
        team_id = self.profiles.resolve_caller_team(user_data)

        post = self.store.insert_post(content, team_id)
        logger.info(f"Post {post.id} created for team {team_id}")
        return post

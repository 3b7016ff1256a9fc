from typing import List, Optional

from teamfeed.config import settings
from teamfeed.database.store import FeedStore
from teamfeed.modules.posts.schemas import FeedPostResponse


class FeedService:
    """Public, read-only post projections. Newest first, bounded by ``limit``."""

    def __init__(self, store: FeedStore):
        self.store = store

    def _row_limit(self, limit: Optional[int]) -> int:
        """None means the default; negative limits are clamped to 0."""
        if limit is None:
            return settings.feed_default_limit
        return max(limit, 0)

    def global_feed(self, limit: Optional[int] = None) -> List[FeedPostResponse]:
        limit = self._row_limit(limit)
        if limit == 0:
            return []
        return self.store.list_posts(limit)

    def team_feed(self, team_id: str, limit: Optional[int] = None) -> List[FeedPostResponse]:
        limit = self._row_limit(limit)
        if limit == 0:
            return []
        return self.store.list_posts(limit, team_id=team_id)

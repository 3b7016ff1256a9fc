import logging
from typing import Any, Dict, Optional, Set

from teamfeed.core.exceptions import (
    AlreadyFollowingError, NotFoundError, ProfileNotFoundError, SelfFollowRejectedError,
    StoreConflictError, StoreReferenceError, UnauthenticatedError
)
from teamfeed.database.store import FeedStore
from teamfeed.modules.profiles.service import ProfileService

logger = logging.getLogger(__name__)


class FollowService:
    def __init__(self, store: FeedStore, profiles: ProfileService = None):
        self.store = store
        self.profiles = profiles or ProfileService(store)

    def caller_team_or_none(self, user_data: Optional[Dict[str, Any]]) -> Optional[str]:
        try:
            return self.profiles.resolve_caller_team(user_data)
        except (UnauthenticatedError, ProfileNotFoundError):
            return None

    def follow(self, user_data: Optional[Dict[str, Any]], target_team_id: str) -> None:
        """Follow ``target_team_id`` on behalf of the caller's team.

        Duplicates are detected by the store's unique constraint, not by a
        prior lookup, so concurrent follows of the same pair leave exactly one
        edge and every other caller gets ``AlreadyFollowingError``.
        """
        team_id = self.profiles.resolve_caller_team(user_data)
        if team_id == target_team_id:
            raise SelfFollowRejectedError()

        try:
            self.store.insert_follow(team_id, target_team_id)
        except StoreConflictError as e:
            logger.info(f"Team {team_id} already follows {target_team_id}")
            raise AlreadyFollowingError() from e
        except StoreReferenceError as e:
            raise NotFoundError("Team not found") from e
        logger.info(f"Team {team_id} followed {target_team_id}")

    def unfollow(self, user_data: Optional[Dict[str, Any]], target_team_id: str) -> None:
        """Remove the edge if present. Removing a missing edge succeeds."""
        team_id = self.profiles.resolve_caller_team(user_data)
        try:
            deleted = self.store.delete_follow(team_id, target_team_id)
        except StoreReferenceError:
            deleted = 0
        logger.info(f"Team {team_id} unfollowed {target_team_id} ({deleted} edge(s) removed)")

    def is_following(self, user_data: Optional[Dict[str, Any]], target_team_id: str) -> bool:
        team_id = self.caller_team_or_none(user_data)
        if team_id is None:
            return False
        try:
            return self.store.follow_exists(team_id, target_team_id)
        except StoreReferenceError:
            return False

    def following_ids(self, user_data: Optional[Dict[str, Any]]) -> Set[str]:
        team_id = self.caller_team_or_none(user_data)
        if team_id is None:
            return set()
        return set(self.store.list_following_ids(team_id))

    def follower_count(self, team_id: str) -> int:
        return self.store.count_followers(team_id)

    def following_count(self, team_id: str) -> int:
        return self.store.count_following(team_id)

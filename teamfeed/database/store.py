"""Storage port for the feed services.

Services depend on ``FeedStore`` only. ``SupabaseFeedStore`` is the production
adapter over the Supabase tables documented in each module's ``models.py``.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

import httpx
from postgrest.exceptions import APIError
from postgrest.types import CountMethod
from supabase import Client

from teamfeed.core.exceptions import StoreConflictError, StoreError, StoreReferenceError
from teamfeed.modules.posts.schemas import FeedPostResponse, PostResponse
from teamfeed.modules.teams.schemas import TeamResponse

logger = logging.getLogger(__name__)

# Postgres SQLSTATE codes surfaced by PostgREST
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
INVALID_TEXT_REPRESENTATION = "22P02"

FEED_POST_COLUMNS = "id, content, created_at, team:teams(id, name)"
TEAM_COLUMNS = "id, name, created_at"


class FeedStore(ABC):
    """Every method is a single round trip to the store."""

    @abstractmethod
    def get_profile_team_id(self, user_id: str) -> Optional[str]:
        ...

    @abstractmethod
    def get_team(self, team_id: str) -> Optional[TeamResponse]:
        ...

    @abstractmethod
    def list_teams(self) -> List[TeamResponse]:
        ...

    @abstractmethod
    def insert_post(self, content: str, team_id: str) -> PostResponse:
        ...

    @abstractmethod
    def list_posts(self, limit: int, team_id: Optional[str] = None) -> List[FeedPostResponse]:
        """Newest first, at most ``limit`` rows, optionally scoped to one team."""

    @abstractmethod
    def insert_follow(self, follower_id: str, following_id: str) -> None:
        """Raises ``StoreConflictError`` when the edge already exists."""

    @abstractmethod
    def delete_follow(self, follower_id: str, following_id: str) -> int:
        """Returns the number of deleted edges (0 or 1)."""

    @abstractmethod
    def follow_exists(self, follower_id: str, following_id: str) -> bool:
        ...

    @abstractmethod
    def list_following_ids(self, follower_id: str) -> List[str]:
        ...

    @abstractmethod
    def count_followers(self, team_id: str) -> int:
        ...

    @abstractmethod
    def count_following(self, team_id: str) -> int:
        ...


class SupabaseFeedStore(FeedStore):
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _execute(self, query, action: str):
        """Run a PostgREST query, translating failures into store errors."""
        try:
            return query.execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise StoreConflictError(e.message) from e
            if e.code in (FOREIGN_KEY_VIOLATION, INVALID_TEXT_REPRESENTATION):
                raise StoreReferenceError() from e
            logger.error(f"Store error during {action}: {e.code} {e.message}")
            raise StoreError() from e
        except httpx.HTTPError as e:
            logger.error(f"Store unreachable during {action}: {str(e)}")
            raise StoreError() from e

    def get_profile_team_id(self, user_id: str) -> Optional[str]:
        try:
            result = self._execute(
                self.supabase.table("profiles")
                .select("team_id")
                .eq("id", user_id)
                .limit(1),
                "get_profile_team_id",
            )
        except StoreReferenceError:
            return None
        if not result.data:
            return None
        return result.data[0].get("team_id")

    def get_team(self, team_id: str) -> Optional[TeamResponse]:
        try:
            result = self._execute(
                self.supabase.table("teams")
                .select(TEAM_COLUMNS)
                .eq("id", team_id)
                .limit(1),
                "get_team",
            )
        except StoreReferenceError:
            return None
        if not result.data:
            return None
        return TeamResponse(**result.data[0])

    def list_teams(self) -> List[TeamResponse]:
        result = self._execute(
            self.supabase.table("teams")
            .select(TEAM_COLUMNS)
            .order("created_at", desc=True),
            "list_teams",
        )
        return [TeamResponse(**team) for team in result.data or []]

    def insert_post(self, content: str, team_id: str) -> PostResponse:
        result = self._execute(
            self.supabase.table("posts").insert({"content": content, "team_id": team_id}),
            "insert_post",
        )
        if not result.data:
            raise StoreError("Failed to create post")
        return PostResponse(**result.data[0])

    def list_posts(self, limit: int, team_id: Optional[str] = None) -> List[FeedPostResponse]:
        query = self.supabase.table("posts").select(FEED_POST_COLUMNS)
        if team_id is not None:
            query = query.eq("team_id", team_id)
        result = self._execute(
            query.order("created_at", desc=True).limit(limit),
            "list_posts",
        )
        return [FeedPostResponse(**post) for post in result.data or []]

    def insert_follow(self, follower_id: str, following_id: str) -> None:
        self._execute(
            self.supabase.table("team_follows").insert({
                "follower_id": follower_id,
                "following_id": following_id
            }),
            "insert_follow",
        )

    def delete_follow(self, follower_id: str, following_id: str) -> int:
        result = self._execute(
            self.supabase.table("team_follows")
            .delete()
            .eq("follower_id", follower_id)
            .eq("following_id", following_id),
            "delete_follow",
        )
        return len(result.data or [])

    def follow_exists(self, follower_id: str, following_id: str) -> bool:
        result = self._execute(
            self.supabase.table("team_follows")
            .select("follower_id")
            .eq("follower_id", follower_id)
            .eq("following_id", following_id)
            .limit(1),
            "follow_exists",
        )
        return bool(result.data)

    def list_following_ids(self, follower_id: str) -> List[str]:
        result = self._execute(
            self.supabase.table("team_follows")
            .select("following_id")
            .eq("follower_id", follower_id),
            "list_following_ids",
        )
        return [row["following_id"] for row in result.data or []]

    def _count_edges(self, column: str, team_id: str) -> int:
        result = self._execute(
            self.supabase.table("team_follows")
            .select("follower_id", count=CountMethod.exact, head=True)
            .eq(column, team_id),
            f"count_{column}",
        )
        return result.count or 0

    def count_followers(self, team_id: str) -> int:
        return self._count_edges("following_id", team_id)

    def count_following(self, team_id: str) -> int:
        return self._count_edges("follower_id", team_id)

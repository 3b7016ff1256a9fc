from typing import Any, Dict, List, Optional

from teamfeed.core.exceptions import NotFoundError
from teamfeed.database.store import FeedStore
from teamfeed.modules.feed.service import FeedService
from teamfeed.modules.follows.service import FollowService
from teamfeed.modules.teams.schemas import TeamDetailResponse, TeamResponse


class TeamService:
    def __init__(self, store: FeedStore, follows: FollowService = None, feed: FeedService = None):
        self.store = store
        self.follows = follows or FollowService(store)
        self.feed = feed or FeedService(store)

    def team_by_id(self, team_id: str) -> TeamResponse:
        """Get team by ID"""
        team = self.store.get_team(team_id)
        if team is None:
            raise NotFoundError("Team not found")
        return team

    def all_teams(self) -> List[TeamResponse]:
        """List all teams, newest first"""
        return self.store.list_teams()

    def get_team_detail(self, team_id: str, user_data: Optional[Dict[str, Any]] = None) -> TeamDetailResponse:
        """Team page: counts, recent post count and the caller's relation to the team"""
        team = self.team_by_id(team_id)
        posts = self.feed.team_feed(team_id)

        my_team_id = self.follows.caller_team_or_none(user_data)
        is_own_team = my_team_id == team_id
        is_following = False
        if my_team_id is not None and not is_own_team:
            is_following = self.store.follow_exists(my_team_id, team_id)

        return TeamDetailResponse(
            team=team,
            follower_count=self.follows.follower_count(team_id),
            following_count=self.follows.following_count(team_id),
            post_count=len(posts),
            is_own_team=is_own_team,
            is_following=is_following
        )

from typing import Any, Dict, Optional

from teamfeed.database.store import FeedStore
from teamfeed.modules.dashboard.schemas import DashboardResponse, DiscoverTeam
from teamfeed.modules.feed.service import FeedService
from teamfeed.modules.profiles.service import ProfileService


class DashboardService:
    def __init__(self, store: FeedStore):
        self.store = store
        self.profiles = ProfileService(store)
        self.feed = FeedService(store)

    def get_dashboard(self, user_data: Optional[Dict[str, Any]]) -> DashboardResponse:
        """My team, its recent posts, and every other team flagged with whether we follow it"""
        my_team = self.profiles.get_my_team(user_data)
        team_id = my_team.team_id

        posts = self.feed.team_feed(team_id)
        following = set(self.store.list_following_ids(team_id))
        discover = [
            DiscoverTeam(**team.model_dump(), is_following=team.id in following)
            for team in self.store.list_teams()
            if team.id != team_id
        ]
        return DashboardResponse(team=my_team.team, posts=posts, discover=discover)

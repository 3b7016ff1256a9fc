from pydantic import BaseModel
from typing import List

from teamfeed.modules.posts.schemas import FeedPostResponse
from teamfeed.modules.teams.schemas import TeamResponse


class DiscoverTeam(TeamResponse):
    is_following: bool = False


class DashboardResponse(BaseModel):
    team: TeamResponse
    posts: List[FeedPostResponse]
    discover: List[DiscoverTeam]

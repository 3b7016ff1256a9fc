from pydantic import BaseModel
from typing import List


class FollowStatusResponse(BaseModel):
    team_id: str
    is_following: bool


class FollowingIdsResponse(BaseModel):
    team_ids: List[str]

from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class TeamSummary(BaseModel):
    id: str
    name: str

    class Config:
        from_attributes = True


class TeamResponse(BaseModel):
    id: str
    name: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TeamDetailResponse(BaseModel):
    team: TeamResponse
    follower_count: int
    following_count: int
    post_count: int
    is_own_team: bool = False
    is_following: bool = False


class CountResponse(BaseModel):
    team_id: str
    count: int

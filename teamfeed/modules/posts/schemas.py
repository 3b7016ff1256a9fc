from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from teamfeed.modules.teams.schemas import TeamSummary


class PostCreate(BaseModel):
    # Length rules live in PostService so the check order stays fixed
    content: str


class PostResponse(BaseModel):
    id: str
    content: str
    team_id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class FeedPostResponse(BaseModel):
    id: str
    content: str
    created_at: datetime
    team: Optional[TeamSummary] = None

    class Config:
        from_attributes = True

from pydantic import BaseModel

from teamfeed.modules.teams.schemas import TeamResponse


class MyTeamResponse(BaseModel):
    user_id: str
    team_id: str
    team: TeamResponse

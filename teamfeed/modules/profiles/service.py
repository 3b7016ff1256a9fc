import logging
from typing import Any, Dict, Optional

from teamfeed.core.exceptions import ProfileNotFoundError, UnauthenticatedError
from teamfeed.database.store import FeedStore
from teamfeed.modules.profiles.schemas import MyTeamResponse

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, store: FeedStore):
        self.store = store

    def resolve_caller_team(self, user_data: Optional[Dict[str, Any]]) -> str:
        """Return the team id bound to the caller's profile.

        ``user_data`` is the identity proven by Supabase Auth (or None for an
        anonymous request). This is the only place a team id for a write is
        ever derived from.
        """
        if not user_data or not user_data.get("id"):
            raise UnauthenticatedError()

        team_id = self.store.get_profile_team_id(user_data["id"])
        if not team_id:
            # Signup trigger may not have run yet
            logger.info(f"No profile resolved for user {user_data['id']}")
            raise ProfileNotFoundError()
        return team_id

    def get_my_team(self, user_data: Optional[Dict[str, Any]]) -> MyTeamResponse:
        """Resolve the caller's team and load the full team row."""
        team_id = self.resolve_caller_team(user_data)
        team = self.store.get_team(team_id)
        if team is None:
            raise ProfileNotFoundError()
        return MyTeamResponse(user_id=user_data["id"], team_id=team_id, team=team)

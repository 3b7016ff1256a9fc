import threading
import uuid
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from teamfeed.core.dependencies import get_auth_service, get_feed_store
from teamfeed.core.exceptions import StoreConflictError, StoreReferenceError
from teamfeed.database.store import FeedStore
from teamfeed.main import app
from teamfeed.modules.auth.service import AuthService
from teamfeed.modules.posts.schemas import FeedPostResponse, PostResponse
from teamfeed.modules.teams.schemas import TeamResponse, TeamSummary

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


class InMemoryFeedStore(FeedStore):
    """FeedStore fake with the same constraints as the Supabase tables."""

    def __init__(self):
        self._lock = threading.Lock()
        self._tick = 0
        self.teams = {}
        self.profiles = {}
        self.posts = []
        self.follows = set()

    def _now(self):
        self._tick += 1
        return BASE_TIME + timedelta(seconds=self._tick)

    # seeding helpers

    def add_team(self, name, team_id=None):
        team_id = team_id or str(uuid.uuid4())
        self.teams[team_id] = TeamResponse(id=team_id, name=name, created_at=self._now())
        return team_id

    def add_user(self, team_id, user_id=None):
        user_id = user_id or str(uuid.uuid4())
        self.profiles[user_id] = team_id
        return user_id

    # FeedStore

    def get_profile_team_id(self, user_id):
        return self.profiles.get(user_id)

    def get_team(self, team_id):
        return self.teams.get(team_id)

    def list_teams(self):
        return sorted(self.teams.values(), key=lambda t: t.created_at, reverse=True)

    def insert_post(self, content, team_id):
        if team_id not in self.teams:
            raise StoreReferenceError()
        with self._lock:
            post = PostResponse(id=str(uuid.uuid4()), content=content, team_id=team_id, created_at=self._now())
            self.posts.append(post)
        return post

    def list_posts(self, limit, team_id=None):
        rows = [p for p in self.posts if team_id is None or p.team_id == team_id]
        rows.sort(key=lambda p: p.created_at, reverse=True)
        return [
            FeedPostResponse(
                id=p.id,
                content=p.content,
                created_at=p.created_at,
                team=TeamSummary(id=p.team_id, name=self.teams[p.team_id].name),
            )
            for p in rows[:limit]
        ]

    def insert_follow(self, follower_id, following_id):
        if follower_id not in self.teams or following_id not in self.teams:
            raise StoreReferenceError()
        with self._lock:
            if (follower_id, following_id) in self.follows:
                raise StoreConflictError("duplicate key value violates unique constraint")
            self.follows.add((follower_id, following_id))

    def delete_follow(self, follower_id, following_id):
        with self._lock:
            if (follower_id, following_id) in self.follows:
                self.follows.remove((follower_id, following_id))
                return 1
        return 0

    def follow_exists(self, follower_id, following_id):
        return (follower_id, following_id) in self.follows

    def list_following_ids(self, follower_id):
        return [following for follower, following in self.follows if follower == follower_id]

    def count_followers(self, team_id):
        return sum(1 for _, following in self.follows if following == team_id)

    def count_following(self, team_id):
        return sum(1 for follower, _ in self.follows if follower == team_id)


@pytest.fixture
def store():
    return InMemoryFeedStore()


@pytest.fixture
def team_a(store):
    return store.add_team("Team A")


@pytest.fixture
def team_b(store):
    return store.add_team("Team B")


@pytest.fixture
def user_a(store, team_a):
    return {"id": store.add_user(team_a), "email": "a@example.com"}


@pytest.fixture
def user_b(store, team_b):
    return {"id": store.add_user(team_b), "email": "b@example.com"}


@pytest.fixture
def tokens(user_a, user_b):
    return {"token-a": user_a, "token-b": user_b}


@pytest.fixture
def mock_auth_service(tokens):
    service = Mock(spec=AuthService)

    def get_current_user(token):
        if token not in tokens:
            raise HTTPException(status_code=401, detail="Invalid or expired token")
        return tokens[token]

    service.get_current_user.side_effect = get_current_user
    return service


@pytest.fixture
def client(store, mock_auth_service):
    app.dependency_overrides[get_feed_store] = lambda: store
    app.dependency_overrides[get_auth_service] = lambda: mock_auth_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

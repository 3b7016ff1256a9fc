import pytest

from teamfeed.core.exceptions import NotFoundError, ProfileNotFoundError
from teamfeed.modules.dashboard.service import DashboardService
from teamfeed.modules.feed.service import FeedService
from teamfeed.modules.follows.service import FollowService
from teamfeed.modules.posts.service import PostService
from teamfeed.modules.teams.service import TeamService


@pytest.fixture
def feed_service(store):
    return FeedService(store)


@pytest.fixture
def seeded_posts(store, user_a, user_b):
    posts = PostService(store)
    for i in range(3):
        posts.create_post(user_a, f"a{i}")
        posts.create_post(user_b, f"b{i}")


def test_global_feed_is_newest_first(feed_service, seeded_posts):
    feed = feed_service.global_feed()

    assert [p.content for p in feed] == ["b2", "a2", "b1", "a1", "b0", "a0"]
    timestamps = [p.created_at for p in feed]
    assert timestamps == sorted(timestamps, reverse=True)


def test_global_feed_limit(feed_service, seeded_posts):
    assert len(feed_service.global_feed(limit=4)) == 4
    assert len(feed_service.global_feed(limit=100)) == 6


def test_global_feed_default_limit(feed_service, store, user_a):
    posts = PostService(store)
    for i in range(55):
        posts.create_post(user_a, f"post {i}")
    assert len(feed_service.global_feed()) == 50


def test_team_feed_is_filtered(feed_service, seeded_posts, team_a):
    feed = feed_service.team_feed(team_a)

    assert [p.content for p in feed] == ["a2", "a1", "a0"]
    assert all(p.team.id == team_a and p.team.name == "Team A" for p in feed)


def test_team_by_id(store, team_a):
    service = TeamService(store)
    assert service.team_by_id(team_a).name == "Team A"
    with pytest.raises(NotFoundError):
        service.team_by_id("missing")


def test_all_teams_newest_first(store, team_a, team_b):
    assert [t.id for t in TeamService(store).all_teams()] == [team_b, team_a]


def test_team_detail_for_anonymous_caller(store, seeded_posts, user_b, team_a):
    FollowService(store).follow(user_b, team_a)

    detail = TeamService(store).get_team_detail(team_a)

    assert detail.team.id == team_a
    assert detail.follower_count == 1
    assert detail.following_count == 0
    assert detail.post_count == 3
    assert detail.is_own_team is False
    assert detail.is_following is False


def test_team_detail_relative_to_caller(store, user_a, user_b, team_a, team_b):
    FollowService(store).follow(user_b, team_a)
    service = TeamService(store)

    assert service.get_team_detail(team_a, user_b).is_following is True
    own = service.get_team_detail(team_a, user_a)
    assert own.is_own_team is True
    assert own.is_following is False


def test_dashboard(store, seeded_posts, user_a, team_a, team_b):
    team_c = store.add_team("Team C")
    FollowService(store).follow(user_a, team_c)

    dashboard = DashboardService(store).get_dashboard(user_a)

    assert dashboard.team.id == team_a
    assert [p.content for p in dashboard.posts] == ["a2", "a1", "a0"]
    discover = {t.id: t.is_following for t in dashboard.discover}
    assert discover == {team_b: False, team_c: True}


def test_dashboard_without_profile(store):
    with pytest.raises(ProfileNotFoundError):
        DashboardService(store).get_dashboard({"id": "no-profile"})


def test_zero_limit_returns_no_rows(feed_service, seeded_posts, team_a):
    assert feed_service.global_feed(limit=0) == []
    assert feed_service.team_feed(team_a, limit=0) == []


def test_negative_limit_is_clamped_to_zero(feed_service, seeded_posts):
    assert feed_service.global_feed(limit=-5) == []

from unittest.mock import MagicMock, Mock

import httpx
import pytest
from postgrest.exceptions import APIError

from teamfeed.core.exceptions import StoreConflictError, StoreError, StoreReferenceError
from teamfeed.database.store import SupabaseFeedStore


def api_error(code, message="boom"):
    return APIError({"code": code, "message": message, "details": None, "hint": None})


@pytest.fixture
def mock_supabase():
    return MagicMock()


@pytest.fixture
def query(mock_supabase):
    # Every builder method returns the same query object so chains end at execute()
    q = MagicMock()
    for name in ("select", "insert", "delete", "eq", "order", "limit"):
        getattr(q, name).return_value = q
    mock_supabase.table.return_value = q
    return q


@pytest.fixture
def supabase_store(mock_supabase):
    return SupabaseFeedStore(mock_supabase)


def test_get_profile_team_id(supabase_store, mock_supabase, query):
    query.execute.return_value = Mock(data=[{"team_id": "t1"}])

    assert supabase_store.get_profile_team_id("u1") == "t1"
    mock_supabase.table.assert_called_with("profiles")
    query.eq.assert_called_with("id", "u1")


def test_get_profile_team_id_missing(supabase_store, query):
    query.execute.return_value = Mock(data=[])
    assert supabase_store.get_profile_team_id("u1") is None


def test_insert_follow_conflict(supabase_store, query):
    query.execute.side_effect = api_error("23505", "duplicate key value")
    with pytest.raises(StoreConflictError):
        supabase_store.insert_follow("t1", "t2")


def test_insert_follow_unknown_team(supabase_store, query):
    query.execute.side_effect = api_error("23503")
    with pytest.raises(StoreReferenceError):
        supabase_store.insert_follow("t1", "missing")


def test_unexpected_api_error_is_store_error(supabase_store, query):
    query.execute.side_effect = api_error("XX000")
    with pytest.raises(StoreError) as exc_info:
        supabase_store.list_teams()
    assert not isinstance(exc_info.value, (StoreConflictError, StoreReferenceError))


def test_network_error_is_store_error(supabase_store, query):
    query.execute.side_effect = httpx.ConnectError("unreachable")
    with pytest.raises(StoreError):
        supabase_store.list_posts(50)


def test_get_team_with_malformed_id(supabase_store, query):
    query.execute.side_effect = api_error("22P02")
    assert supabase_store.get_team("not-a-uuid") is None


def test_list_posts_orders_and_limits(supabase_store, query):
    query.execute.return_value = Mock(data=[{
        "id": "p1",
        "content": "hi",
        "created_at": "2026-01-01T00:00:00+00:00",
        "team": {"id": "t1", "name": "Team A"},
    }])

    posts = supabase_store.list_posts(10, team_id="t1")

    query.eq.assert_called_with("team_id", "t1")
    query.order.assert_called_with("created_at", desc=True)
    query.limit.assert_called_with(10)
    assert posts[0].team.name == "Team A"


def test_insert_post(supabase_store, query):
    query.execute.return_value = Mock(data=[{
        "id": "p1", "content": "hi", "team_id": "t1", "created_at": "2026-01-01T00:00:00+00:00"
    }])

    post = supabase_store.insert_post("hi", "t1")

    query.insert.assert_called_with({"content": "hi", "team_id": "t1"})
    assert post.id == "p1"


def test_delete_follow_returns_deleted_rows(supabase_store, query):
    query.execute.return_value = Mock(data=[])
    assert supabase_store.delete_follow("t1", "t2") == 0


def test_counts(supabase_store, query):
    query.execute.return_value = Mock(data=[], count=3)

    assert supabase_store.count_followers("t1") == 3
    query.eq.assert_called_with("following_id", "t1")
    assert supabase_store.count_following("t1") == 3
    query.eq.assert_called_with("follower_id", "t1")

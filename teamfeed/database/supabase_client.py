from supabase import create_client, Client
from teamfeed.config import settings


class SupabaseClient:
    _client: Client = None
    _service_client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        """Anon-key client. Used for Supabase Auth calls (sign up, sign in, token checks)."""
        if cls._client is None:
            cls._client = create_client(settings.supabase_url, settings.supabase_key)
        return cls._client

    @classmethod
    def get_service_client(cls) -> Client:
        """Client with service_role key; bypasses RLS. Used by the FeedStore, which
        derives every team id from the caller's profile itself."""
        if cls._service_client is None and settings.supabase_service_role_key:
            cls._service_client = create_client(
                settings.supabase_url, settings.supabase_service_role_key
            )
        return cls._service_client or cls.get_client()

    @classmethod
    def create_auth_client(cls) -> Client:
        """Fresh anon-key client for flows that store a session on the client
        (sign in, code exchange, sign out) so sessions never leak between requests."""
        return create_client(settings.supabase_url, settings.supabase_key)

    @classmethod
    def reset_client(cls):
        cls._client = None
        cls._service_client = None


def get_supabase() -> Client:
    return SupabaseClient.get_client()


def get_service_supabase() -> Client:
    return SupabaseClient.get_service_client()

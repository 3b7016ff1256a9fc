"""
Core dependencies for caller identity and store access
"""

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from teamfeed.database.supabase_client import get_supabase, get_service_supabase
from teamfeed.database.store import FeedStore, SupabaseFeedStore
from teamfeed.modules.auth.service import AuthService
from supabase import Client
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)

# auto_error=False: anonymous requests reach the handlers, which decide
security = HTTPBearer(auto_error=False)


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


def get_feed_store(supabase: Client = Depends(get_service_supabase)) -> FeedStore:
    return SupabaseFeedStore(supabase)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security)
) -> str:
    """Extract JWT token from Authorization header"""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return credentials.credentials


def get_current_user(
    token: str = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service)
) -> Dict[str, Any]:
    """Caller identity for endpoints that require a session. 401 when absent or invalid."""
    return auth_service.get_current_user(token)


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> Optional[Dict[str, Any]]:
    """Caller identity, or None for anonymous callers and unusable tokens.

    Services turn None into UnauthenticatedError where a session is required,
    and into anonymous results (e.g. is_following=False) elsewhere.
    """
    if credentials is None:
        return None
    try:
        return auth_service.get_current_user(credentials.credentials)
    except HTTPException:
        logger.info("Ignoring invalid bearer token on optional-auth request")
        return None

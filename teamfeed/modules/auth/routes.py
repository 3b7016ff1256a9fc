from fastapi import APIRouter, Cookie, Depends, HTTPException
from fastapi.responses import RedirectResponse
from teamfeed.config import settings
from teamfeed.database.supabase_client import SupabaseClient, get_service_supabase
from teamfeed.modules.auth.schemas import LoginRequest, SignupRequest, TokenResponse, SignupResponse
from teamfeed.modules.auth.service import AuthService
from teamfeed.core.dependencies import get_auth_service, get_bearer_token, get_current_user
from supabase import Client
from typing import Dict, Optional

router = APIRouter(prefix="/auth", tags=["auth"])

DEFAULT_NEXT = "/dashboard"
CALLBACK_ERROR_PATH = "/auth/login?error=auth_callback_error"


def get_session_auth_service() -> AuthService:
    """AuthService on a fresh client, for calls that store a session on the client"""
    return AuthService(SupabaseClient.create_auth_client())


def safe_next_path(next_path: Optional[str]) -> str:
    """Only site-relative paths are allowed as redirect targets"""
    if not next_path or not next_path.startswith("/") or next_path.startswith("//"):
        return DEFAULT_NEXT
    return next_path


@router.post("/signup", response_model=SignupResponse, status_code=201)
def signup(
    signup_data: SignupRequest,
    service: AuthService = Depends(get_session_auth_service)
):
    """Register a new user; a team and profile are provisioned for them"""
    return service.signup(signup_data)


@router.post("/login", response_model=TokenResponse)
def login(
    login_data: LoginRequest,
    service: AuthService = Depends(get_session_auth_service)
):
    """Login and get access token"""
    return service.login(login_data)


@router.post("/logout", status_code=200)
def logout(
    token: str = Depends(get_bearer_token),
    current_user: Dict = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
    admin_client: Client = Depends(get_service_supabase)
):
    """Logout and revoke the session"""
    service.logout(token, admin_client=admin_client)
    return {"message": "Logged out successfully"}


@router.get("/callback")
def oauth_callback(
    code: Optional[str] = None,
    next: Optional[str] = None,
    code_verifier: Optional[str] = Cookie(None),
    service: AuthService = Depends(get_session_auth_service)
):
    """OAuth callback: exchange the code for a session, then redirect to the site"""
    if code:
        try:
            tokens = service.exchange_code(code, code_verifier)
        except HTTPException:
            tokens = None
        if tokens is not None:
            response = RedirectResponse(f"{settings.site_url}{safe_next_path(next)}", status_code=303)
            response.set_cookie("access_token", tokens.access_token, httponly=True, secure=settings.is_production, samesite="lax")
            if tokens.refresh_token:
                response.set_cookie("refresh_token", tokens.refresh_token, httponly=True, secure=settings.is_production, samesite="lax")
            return response

    return RedirectResponse(f"{settings.site_url}{CALLBACK_ERROR_PATH}", status_code=303)


@router.get("/me")
def get_me(current_user: Dict = Depends(get_current_user)):
    """Get current authenticated user"""
    return current_user

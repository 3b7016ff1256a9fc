import logging
from supabase import Client
from teamfeed.modules.auth.schemas import LoginRequest, SignupRequest, TokenResponse, SignupResponse
from fastapi import HTTPException
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def signup(self, signup_data: SignupRequest) -> SignupResponse:
        """Register a new user. The database trigger provisions their team and profile."""
        try:
            auth_response = self.supabase.auth.sign_up({
                "email": signup_data.email,
                "password": signup_data.password
            })

            if not auth_response.user:
                raise HTTPException(status_code=400, detail="Failed to register user")

            logger.info(f"User {auth_response.user.id} signed up")
            session = auth_response.session
            return SignupResponse(
                user_id=auth_response.user.id,
                email=auth_response.user.email or signup_data.email,
                access_token=session.access_token if session else None,
                message="User registered successfully"
            )
        except HTTPException:
            raise
        except Exception as e:
            error_message = str(e)
            if "already registered" in error_message.lower() or "already exists" in error_message.lower():
                raise HTTPException(status_code=400, detail="User already exists")
            logger.error(f"Signup failed: {error_message}")
            raise HTTPException(status_code=500, detail=f"Registration failed: {error_message}")

    def login(self, login_data: LoginRequest) -> TokenResponse:
        """Authenticate user using Supabase Auth"""
        try:
            auth_response = self.supabase.auth.sign_in_with_password({
                "email": login_data.email,
                "password": login_data.password
            })

            if not auth_response.user or not auth_response.session:
                raise HTTPException(status_code=401, detail="Invalid credentials")

            return TokenResponse(
                access_token=auth_response.session.access_token,
                refresh_token=auth_response.session.refresh_token,
                token_type="bearer",
                user_id=auth_response.user.id,
                email=auth_response.user.email or login_data.email
            )
        except HTTPException:
            raise
        except Exception as e:
            error_message = str(e)
            if "invalid" in error_message.lower() or "credentials" in error_message.lower():
                raise HTTPException(status_code=401, detail="Invalid email or password")
            logger.error(f"Login failed: {error_message}")
            raise HTTPException(status_code=500, detail=f"Login failed: {error_message}")

    def exchange_code(self, code: str, code_verifier: Optional[str] = None) -> TokenResponse:
        """Exchange an OAuth authorization code for a session"""
        params = {"auth_code": code}
        if code_verifier:
            params["code_verifier"] = code_verifier
        try:
            auth_response = self.supabase.auth.exchange_code_for_session(params)
        except Exception as e:
            logger.info(f"OAuth code exchange failed: {str(e)}")
            raise HTTPException(status_code=401, detail="Authentication failed")

        if not auth_response.user or not auth_response.session:
            raise HTTPException(status_code=401, detail="Authentication failed")

        return TokenResponse(
            access_token=auth_response.session.access_token,
            refresh_token=auth_response.session.refresh_token,
            user_id=auth_response.user.id,
            email=auth_response.user.email or ""
        )

    def get_current_user(self, token: str) -> Dict[str, Any]:
        """Get current user details from a Supabase Auth token"""
        try:
            user_response = self.supabase.auth.get_user(jwt=token)
            if not user_response or not user_response.user:
                raise HTTPException(status_code=401, detail="Invalid or expired token")
            user = user_response.user
            return {
                "id": user.id,
                "email": user.email,
                "user_metadata": user.user_metadata or {},
                "app_metadata": user.app_metadata or {},
                "created_at": user.created_at,
            }
        except HTTPException:
            raise
        except Exception as e:
            error_msg = str(e)
            if "JWT" in error_msg or "expired" in error_msg.lower() or "invalid" in error_msg.lower():
                raise HTTPException(status_code=401, detail="Invalid or expired token")
            raise HTTPException(status_code=401, detail="Authentication failed")

    def logout(self, token: str, admin_client: Client = None) -> bool:
        """Revoke the sessions behind ``token``. Needs the service role client."""
        try:
            client = admin_client or self.supabase
            client.auth.admin.sign_out(token)
            return True
        except Exception as e:
            # Tokens are stateless JWTs; an unrevoked token still expires on its own
            logger.warning(f"Logout could not revoke session: {str(e)}")
            return False

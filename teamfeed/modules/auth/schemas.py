from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    refresh_token: Optional[str] = None
    token_type: str = "bearer"
    user_id: str
    email: str


class SignupRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)


class SignupResponse(BaseModel):
    user_id: str
    email: str
    # None when email confirmation is required before the first session
    access_token: Optional[str] = None
    message: str

"""
Authentication Routes
Admin login, logout and session check
"""

from fastapi import APIRouter, HTTPException, status, Depends
from pydantic import BaseModel, EmailStr
from typing import Optional
from highfive.config import settings
from highfive.auth import get_current_user
from highfive.services.auth_service import auth_service

router = APIRouter()


# Request/Response Models
class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class LoginResponse(BaseModel):
    status: str
    message: str
    access_token: str
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None
    email: str


class SessionResponse(BaseModel):
    email: str
    user_id: Optional[str] = None
    is_admin: bool


@router.post("/login", response_model=LoginResponse)
async def login(credentials: LoginRequest):
    """
    Admin login

    Process:
    1. Reject emails not on the admin allowlist
    2. Password sign-in against Supabase Auth
    3. Return the Supabase session tokens
    """

    if not settings.is_admin_email(credentials.email):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied. Only authorized administrators can log in."
        )

    session = await auth_service.sign_in(credentials.email, credentials.password)

    return LoginResponse(
        status="success",
        message="Login successful",
        access_token=session["access_token"],
        refresh_token=session.get("refresh_token"),
        expires_in=session.get("expires_in"),
        email=(session.get("user") or {}).get("email", credentials.email)
    )


@router.post("/logout")
async def logout(current_user: dict = Depends(get_current_user)):
    """Revoke the current Supabase session"""
    await auth_service.sign_out(current_user["access_token"])
    return {"status": "success", "message": "Logged out"}


@router.get("/me", response_model=SessionResponse)
async def me(current_user: dict = Depends(get_current_user)):
    """Current session (used by the client to restore login state)"""
    return SessionResponse(
        email=current_user["email"],
        user_id=current_user["user_id"],
        is_admin=current_user["is_admin"]
    )

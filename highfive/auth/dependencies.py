"""
Authentication Dependencies
Supabase access token verification
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from highfive.config import settings

# Security scheme
security = HTTPBearer()


def create_access_token(email: str, user_id: Optional[str] = None, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a token shaped like a Supabase access token

    Supabase issues the real tokens; this is used by the admin console in
    local development and by the test suite.

    Args:
        email: Account email
        user_id: Auth user id (random when omitted)
        expires_delta: Token lifetime (one hour by default)

    Returns:
        Encoded JWT token
    """
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(hours=1))

    to_encode = {
        "sub": user_id or str(uuid4()),
        "email": email,
        "aud": settings.JWT_AUDIENCE,
        "role": "authenticated",
        "exp": expire,
    }

    return jwt.encode(to_encode, settings.SUPABASE_JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    """
    Decode a Supabase access token

    Args:
        token: JWT token string

    Returns:
        Decoded token payload

    Raises:
        HTTPException: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.SUPABASE_JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE
        )
        return payload
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_user(credentials: HTTPAuthorizationCredentials = Depends(security)) -> dict:
    """
    Get current authenticated user from the bearer token

    Raises:
        HTTPException: If token is invalid or carries no email
    """
    payload = decode_access_token(credentials.credentials)

    user_email = payload.get("email")

    if user_email is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials"
        )

    return {
        "email": user_email,
        "user_id": payload.get("sub"),
        "is_admin": settings.is_admin_email(user_email),
        "access_token": credentials.credentials,
    }


async def get_current_admin(current_user: dict = Depends(get_current_user)) -> dict:
    """
    Require an allowlisted admin

    Raises:
        HTTPException: If the user's email is not in ADMIN_EMAILS
    """
    if not current_user["is_admin"]:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized. Admin access required."
        )

    return current_user

"""
Auth Service
Supabase Auth (GoTrue) sign-in, sign-out and admin user management
"""

import logging
from typing import List, Optional
import httpx
from fastapi import HTTPException, status
from highfive.config import settings

logger = logging.getLogger(__name__)


class AuthService:
    """Thin async wrapper over the Supabase Auth REST API"""

    @staticmethod
    def _client() -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=30)

    @staticmethod
    def _base() -> str:
        if not settings.SUPABASE_URL or not settings.SUPABASE_ANON_KEY:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Supabase Auth is not configured"
            )
        return f"{settings.SUPABASE_URL.rstrip('/')}/auth/v1"

    @staticmethod
    def _admin_headers() -> dict:
        if not settings.SUPABASE_SERVICE_ROLE_KEY:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="SUPABASE_SERVICE_ROLE_KEY is not configured"
            )
        return {
            "apikey": settings.SUPABASE_SERVICE_ROLE_KEY,
            "Authorization": f"Bearer {settings.SUPABASE_SERVICE_ROLE_KEY}",
        }

    @staticmethod
    def _error_message(resp: httpx.Response) -> str:
        try:
            body = resp.json()
        except ValueError:
            return resp.text
        return (
            body.get("error_description")
            or body.get("msg")
            or body.get("message")
            or body.get("error")
            or resp.text
        )

    @staticmethod
    async def sign_in(email: str, password: str) -> dict:
        """
        Password sign-in

        Returns:
            Supabase session: access_token, refresh_token, expires_in, user

        Raises:
            HTTPException 401 on bad credentials, 502 when Supabase fails
        """
        url = f"{AuthService._base()}/token"
        headers = {"apikey": settings.SUPABASE_ANON_KEY}

        async with AuthService._client() as client:
            resp = await client.post(
                url,
                params={"grant_type": "password"},
                headers=headers,
                json={"email": email, "password": password}
            )

        if resp.status_code in (400, 401):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=AuthService._error_message(resp) or "Invalid email or password"
            )
        if resp.status_code != 200:
            logger.warning("Supabase sign-in failed with %s", resp.status_code)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Auth service error: {AuthService._error_message(resp)}"
            )

        return resp.json()

    @staticmethod
    async def sign_out(access_token: str) -> None:
        """Revoke the session behind an access token"""

        url = f"{AuthService._base()}/logout"
        headers = {
            "apikey": settings.SUPABASE_ANON_KEY,
            "Authorization": f"Bearer {access_token}",
        }

        async with AuthService._client() as client:
            resp = await client.post(url, headers=headers)

        # An already-expired session is as good as signed out
        if resp.status_code not in (200, 204, 401, 403):
            logger.warning("Supabase sign-out failed: %s", AuthService._error_message(resp))

    @staticmethod
    async def create_user(email: str, password: str) -> dict:
        """Create a confirmed user (service-role key required)"""

        url = f"{AuthService._base()}/admin/users"

        async with AuthService._client() as client:
            resp = await client.post(
                url,
                headers=AuthService._admin_headers(),
                json={"email": email, "password": password, "email_confirm": True}
            )

        if resp.status_code == 422:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=AuthService._error_message(resp)
            )
        if resp.status_code not in (200, 201):
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Could not create user: {AuthService._error_message(resp)}"
            )

        return resp.json()

    @staticmethod
    async def list_users() -> List[dict]:
        """List auth users (service-role key required)"""

        url = f"{AuthService._base()}/admin/users"

        async with AuthService._client() as client:
            resp = await client.get(url, headers=AuthService._admin_headers())

        if resp.status_code != 200:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Could not list users: {AuthService._error_message(resp)}"
            )

        body = resp.json()
        return body.get("users", []) if isinstance(body, dict) else body

    @staticmethod
    async def find_user(email: str) -> Optional[dict]:
        email = email.strip().lower()
        for user in await AuthService.list_users():
            if (user.get("email") or "").lower() == email:
                return user
        return None


# Create singleton instance
auth_service = AuthService()

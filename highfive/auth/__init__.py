"""
Authentication Module
Supabase JWT verification and admin allowlist checks
"""

from highfive.auth.dependencies import (
    create_access_token,
    decode_access_token,
    get_current_user,
    get_current_admin
)

__all__ = [
    "create_access_token",
    "decode_access_token",
    "get_current_user",
    "get_current_admin",
]

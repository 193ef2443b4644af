"""
Script to verify Supabase Auth for the admin panel
Lists auth users, then tries a password login
"""

import sys
import asyncio
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from fastapi import HTTPException
from highfive.config import settings
from highfive.auth import decode_access_token
from highfive.services.auth_service import auth_service


async def list_users():
    try:
        users = await auth_service.list_users()
    except HTTPException as e:
        print(f"❌ Could not list users: {e.detail}")
        return

    print(f"Found {len(users)} auth users:")
    for user in users:
        email = user.get("email") or "-"
        marker = "admin" if settings.is_admin_email(email) else "     "
        confirmed = "confirmed" if user.get("email_confirmed_at") else "unconfirmed"
        print(f"   [{marker}] {email} ({confirmed})")


async def try_login(email: str, password: str):
    if not settings.is_admin_email(email):
        print(f"⚠️  {email} is not in ADMIN_EMAILS; the admin panel will refuse it")

    try:
        session = await auth_service.sign_in(email, password)
    except HTTPException as e:
        print(f"❌ Login failed: {e.detail}")
        return

    print("✅ Login successful")

    try:
        payload = decode_access_token(session["access_token"])
    except HTTPException:
        print("⚠️  Token could not be verified with SUPABASE_JWT_SECRET")
    else:
        print(f"   Token subject: {payload.get('sub')}")

    await auth_service.sign_out(session["access_token"])
    print("[OK] Signed out")


async def main():
    """Main function"""
    print("\n" + "="*60)
    print("CHECK AUTH")
    print("="*60 + "\n")

    if not settings.SUPABASE_URL or not settings.SUPABASE_ANON_KEY:
        print("❌ Missing SUPABASE_URL or SUPABASE_ANON_KEY in .env")
        return

    if settings.SUPABASE_SERVICE_ROLE_KEY:
        await list_users()
        print()

    email = input("Enter email: ").strip()
    password = input("Enter password: ").strip()

    print("\n")
    await try_login(email, password)
    print("\n")


if __name__ == "__main__":
    asyncio.run(main())

"""
Script to create the admin panel users in Supabase Auth
Creates a confirmed account for every email in ADMIN_EMAILS
"""

import sys
import asyncio
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from fastapi import HTTPException
from highfive.config import settings
from highfive.services.auth_service import auth_service


async def create_admin_user(email: str, password: str) -> bool:
    """
    Create one confirmed admin user

    Args:
        email: Admin email (must be in ADMIN_EMAILS to log in)
        password: Initial password

    Returns:
        True if the user was created, False if skipped or failed
    """
    existing = await auth_service.find_user(email)
    if existing:
        print(f"⏭️  User {email} already exists, skipping...")
        return False

    try:
        user = await auth_service.create_user(email, password)
    except HTTPException as e:
        print(f"❌ Error creating user {email}: {e.detail}")
        return False

    print(f"✅ Successfully created user {email}")
    print(f"   ID: {user.get('id')}")
    return True


async def main():
    """Main function"""
    print("\n" + "="*60)
    print("CREATE ADMIN USERS")
    print("="*60 + "\n")

    if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_ROLE_KEY:
        print("❌ Missing SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY in .env")
        return

    emails = settings.admin_emails
    if not emails:
        print("❌ ADMIN_EMAILS is empty. Add comma-separated admin emails to .env")
        return

    created = 0
    for email in emails:
        password = input(f"Password for {email} (blank to skip): ").strip()
        if not password:
            print(f"⏭️  Skipping {email}")
            continue
        if len(password) < 8:
            print("❌ Password must be at least 8 characters!")
            continue
        if await create_admin_user(email, password):
            created += 1

    print(f"\n[OK] Created {created} of {len(emails)} admin users\n")


if __name__ == "__main__":
    asyncio.run(main())

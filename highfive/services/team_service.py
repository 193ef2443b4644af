"""
Team Service
Business logic for team member management
"""

from typing import Any, Dict, Optional
from uuid import UUID
from fastapi import HTTPException, status
from highfive.database import database
from highfive.services.collection_service import CollectionService


class TeamService(CollectionService):
    """Service for team member operations"""

    table = "team_members"
    columns = (
        "name", "role", "department", "avatar_url", "display_order",
        "bio", "email", "linkedin", "status",
    )
    order_by = "display_order ASC, created_at DESC"
    label = "Team member"

    @classmethod
    def encode(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        data = dict(values)
        if data.get("status") is not None:
            data["status"] = getattr(data["status"], "value", data["status"])
        return data

    @staticmethod
    async def ensure_email_available(email: Optional[str], exclude_id: Optional[UUID] = None) -> None:
        """Reject an email already used by another member"""

        if not email:
            return

        query = "SELECT id, name FROM team_members WHERE LOWER(email) = LOWER(:email)"
        params = {"email": email}
        if exclude_id:
            query += " AND id <> :exclude_id"
            params["exclude_id"] = str(exclude_id)

        existing = await database.fetch_one(query, params)

        if existing:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=(
                    f"This email is already used by {existing['name']}. "
                    "Please use a different email or leave it empty."
                )
            )

    @classmethod
    async def create_member(cls, values: Dict[str, Any]) -> dict:
        """Create a team member after checking email uniqueness"""
        await cls.ensure_email_available(values.get("email"))
        return await cls.create(values)

    @classmethod
    async def update_member(cls, member_id: UUID, values: Dict[str, Any]) -> dict:
        """Update a team member after checking email uniqueness"""
        await cls.ensure_email_available(values.get("email"), exclude_id=member_id)
        return await cls.update(member_id, values)


# Create singleton instance
team_service = TeamService()

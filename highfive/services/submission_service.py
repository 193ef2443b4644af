"""
Submission Service
Job applications and visitor feedback from public forms
"""

from typing import Any, Dict, List
from highfive.services.collection_service import CollectionService


class ApplicationService(CollectionService):
    """Service for job applications"""

    table = "applications"
    columns = ("name", "email", "role", "portfolio_url", "resume_url", "message")
    list_limit = 100
    label = "Application"


class FeedbackService(CollectionService):
    """Service for feedback submissions and moderation"""

    table = "feedback"
    columns = ("name", "email", "rating", "message", "is_approved", "project_id")
    label = "Feedback"
    has_updated_at = True

    @classmethod
    def encode(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        data = dict(values)
        if data.get("project_id") is not None:
            data["project_id"] = str(data["project_id"])
        return data

    @classmethod
    async def submit(cls, values: Dict[str, Any]) -> dict:
        """Store public feedback (auto-approved, blank name -> Anonymous)"""

        data = dict(values)
        name = (data.get("name") or "").strip()
        email = (data.get("email") or "").strip()

        data["name"] = name or "Anonymous"
        data["email"] = email or None
        data["is_approved"] = True

        return await cls.create(data)

    @classmethod
    async def list_approved(cls) -> List[dict]:
        return await cls.list_all(where="is_approved = TRUE")


# Create singleton instances
application_service = ApplicationService()
feedback_service = FeedbackService()

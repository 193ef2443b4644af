"""
Event Service
Business logic for event management
"""

from typing import Any, Dict, List
from highfive.services.collection_service import CollectionService


class EventService(CollectionService):
    """Service for event operations"""

    table = "events"
    columns = (
        "title", "description", "event_date", "location", "image_url",
        "category", "status", "featured", "organizers", "tags",
        "registration_url",
    )
    label = "Event"
    has_updated_at = True

    @classmethod
    def encode(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        data = dict(values)
        if data.get("status") is not None:
            data["status"] = getattr(data["status"], "value", data["status"])
        return data

    @classmethod
    def decode(cls, row) -> dict:
        data = dict(row)
        data["organizers"] = list(data.get("organizers") or [])
        data["tags"] = list(data.get("tags") or [])
        return data

    @classmethod
    async def list_public(cls) -> List[dict]:
        """Events for the public calendar, soonest first"""
        return await cls.list_all(order_by="event_date ASC")

    @classmethod
    async def list_admin(cls) -> List[dict]:
        """Events for the admin panel, newest first"""
        return await cls.list_all()


# Create singleton instance
event_service = EventService()

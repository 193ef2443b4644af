"""
Activity Service
Public activity feed entries
"""

from typing import Any, Dict
from highfive.services.collection_service import CollectionService


class ActivityService(CollectionService):
    """Service for activity feed operations"""

    table = "activity"
    columns = ("type", "title")
    list_limit = 50
    label = "Activity"

    @classmethod
    def encode(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        data = dict(values)
        if data.get("type") is not None:
            data["type"] = getattr(data["type"], "value", data["type"])
        return data


# Create singleton instance
activity_service = ActivityService()

"""
Offering Service
Services listed on the services page
"""

from typing import List
from highfive.services.collection_service import CollectionService


class OfferingService(CollectionService):
    """Service for the services table"""

    table = "services"
    columns = ("title", "description", "features", "icon", "sort_order", "is_active")
    order_by = "sort_order ASC, created_at DESC"
    label = "Service"

    @classmethod
    def decode(cls, row) -> dict:
        data = dict(row)
        data["features"] = list(data.get("features") or [])
        return data

    @classmethod
    async def list_services(cls, active_only: bool = False) -> List[dict]:
        if active_only:
            return await cls.list_all(where="is_active = TRUE")
        return await cls.list_all()


# Create singleton instance
offering_service = OfferingService()

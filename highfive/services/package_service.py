"""
Package Service
Pricing packages with included/excluded feature lines
"""

import json
from typing import Any, Dict, List
from highfive.services.collection_service import CollectionService


def load_features(value: Any) -> List[dict]:
    """Stored JSONB (text from asyncpg or already decoded) -> feature dicts"""
    if value is None:
        return []
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            return []
    if not isinstance(value, list):
        return []

    features = []
    for item in value:
        if isinstance(item, str):
            item = {"name": item, "included": True}
        if isinstance(item, dict) and item.get("name"):
            features.append({"name": item["name"], "included": item.get("included", True) is not False})
    return features


class PackageService(CollectionService):
    """Service for the packages table"""

    table = "packages"
    columns = ("name", "price", "description", "features", "is_recommended", "sort_order", "is_active")
    order_by = "sort_order ASC, created_at DESC"
    label = "Package"

    @classmethod
    def encode(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        data = dict(values)
        if "features" in data:
            data["features"] = json.dumps(load_features(data["features"]))
        return data

    @classmethod
    def decode(cls, row) -> dict:
        data = dict(row)
        data["features"] = load_features(data.get("features"))
        return data

    @classmethod
    async def list_packages(cls, active_only: bool = False) -> List[dict]:
        if active_only:
            return await cls.list_all(where="is_active = TRUE")
        return await cls.list_all()


# Create singleton instance
package_service = PackageService()

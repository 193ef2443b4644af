"""
Project Service
Portfolio projects with keyword-grouped tech stacks
"""

import json
from typing import Any, Dict, List, Optional, Union
from highfive.services.collection_service import CollectionService

TECH_BUCKETS = {
    "frontend": [
        "React", "Next.js", "Vue", "Angular", "Svelte", "TailwindCSS",
        "CSS", "HTML", "JavaScript", "TypeScript",
    ],
    "backend": [
        "Node.js", "Express", "Python", "Django", "FastAPI", "Go", "Rust",
        "Java", "Spring",
    ],
    "database": ["PostgreSQL", "MySQL", "MongoDB", "Redis", "Supabase", "Firebase"],
}
BUCKET_ORDER = ("frontend", "backend", "database", "other")


def group_tech_stack(items: List[str]) -> Dict[str, Any]:
    """
    Group tech stack items into frontend/backend/database/other buckets

    Each item goes to the first bucket with a keyword it contains, or to
    "other". The typed order is stored under "order" so reads can give
    it back unchanged.
    """
    grouped: Dict[str, Any] = {name: [] for name in BUCKET_ORDER}

    for item in items:
        bucket = next(
            (name for name, keywords in TECH_BUCKETS.items() if any(k in item for k in keywords)),
            "other"
        )
        grouped[bucket].append(item)

    grouped["order"] = list(items)
    return grouped


def flatten_tech_stack(value: Union[None, str, list, dict]) -> List[str]:
    """Flatten a stored tech stack (grouped dict, legacy list or JSON text)"""
    if value is None:
        return []

    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            return [value]

    if isinstance(value, list):
        return list(value)

    if isinstance(value, dict):
        if isinstance(value.get("order"), list):
            return list(value["order"])

        # Rows written before "order" existed: bucket order, each item once
        flat = []
        for bucket in BUCKET_ORDER:
            for item in value.get(bucket) or []:
                if item not in flat:
                    flat.append(item)
        return flat

    return []


class ProjectService(CollectionService):
    """Service for project operations"""

    table = "projects"
    columns = (
        "title", "description", "tagline", "status", "tech_stack",
        "key_features", "image_url", "github_url", "demo_url",
        "case_study_urls", "featured",
    )
    label = "Project"

    @classmethod
    def encode(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        data = dict(values)

        if data.get("status") is not None:
            data["status"] = getattr(data["status"], "value", data["status"])

        if "tech_stack" in data:
            stack = data["tech_stack"]
            if isinstance(stack, list):
                stack = group_tech_stack(stack)
            data["tech_stack"] = json.dumps(stack) if stack is not None else None

        return data

    @classmethod
    def decode(cls, row) -> dict:
        data = dict(row)
        data["tech_stack"] = flatten_tech_stack(data.get("tech_stack"))
        return data

    @classmethod
    async def list_projects(cls, featured_only: bool = False, status: Optional[str] = None) -> List[dict]:
        clauses = []
        params = {}
        if featured_only:
            clauses.append("featured = TRUE")
        if status:
            clauses.append("status = :status")
            params["status"] = status

        return await cls.list_all(where=" AND ".join(clauses) or None, params=params)


# Create singleton instance
project_service = ProjectService()

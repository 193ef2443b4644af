"""
Activity Feed Request/Response Models
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from enum import Enum
from uuid import UUID


class ActivityType(str, Enum):
    PROJECT = "project"
    MEMBER = "member"
    ANNOUNCEMENT = "announcement"


class CreateActivityRequest(BaseModel):
    """Request to post an activity entry"""
    type: ActivityType
    title: str = Field(..., min_length=1, max_length=300)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return v.strip() if isinstance(v, str) else v


class ActivityResponse(BaseModel):
    """Activity entry"""
    model_config = {"from_attributes": True}

    id: UUID
    type: str
    title: str
    created_at: Optional[datetime] = None

"""
Event Request/Response Models
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import date, datetime
from enum import Enum
from uuid import UUID


class EventStatus(str, Enum):
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"


def split_list(v):
    """Accept a list or a comma-separated string"""
    if v is None:
        return v
    if isinstance(v, str):
        return [item.strip() for item in v.split(",") if item.strip()]
    return v


class CreateEventRequest(BaseModel):
    """Request to add an event"""
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    event_date: date
    location: Optional[str] = None
    image_url: Optional[str] = None
    category: Optional[str] = None
    status: EventStatus = EventStatus.UPCOMING
    featured: bool = False
    organizers: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    registration_url: Optional[str] = None

    @field_validator("organizers", "tags", mode="before")
    @classmethod
    def parse_list(cls, v):
        return split_list(v) or []


class UpdateEventRequest(BaseModel):
    """Request to update an event"""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    event_date: Optional[date] = None
    location: Optional[str] = None
    image_url: Optional[str] = None
    category: Optional[str] = None
    status: Optional[EventStatus] = None
    featured: Optional[bool] = None
    organizers: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    registration_url: Optional[str] = None

    @field_validator("organizers", "tags", mode="before")
    @classmethod
    def parse_list(cls, v):
        return split_list(v)


class EventResponse(BaseModel):
    """Event details"""
    model_config = {"from_attributes": True}

    id: UUID
    title: str
    description: Optional[str] = None
    event_date: date
    location: Optional[str] = None
    image_url: Optional[str] = None
    category: Optional[str] = None
    status: str
    featured: bool = False
    organizers: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    registration_url: Optional[str] = None
    created_at: Optional[datetime] = None

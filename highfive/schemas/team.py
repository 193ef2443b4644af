"""
Team Member Request/Response Models
"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime
from enum import Enum
from uuid import UUID


class MemberStatus(str, Enum):
    ACTIVE = "Active"
    ALUMNI = "Alumni"
    MENTOR = "Mentor"


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v.strip() if isinstance(v, str) else v


class CreateTeamMemberRequest(BaseModel):
    """Request to add a team member"""
    name: str = Field(..., min_length=1, max_length=200)
    role: str = Field(..., min_length=1, max_length=200)
    department: Optional[str] = Field(None, max_length=100)
    avatar_url: Optional[str] = None
    display_order: int = 0
    bio: Optional[str] = None
    email: Optional[EmailStr] = None
    linkedin: Optional[str] = None
    status: MemberStatus = MemberStatus.ACTIVE

    @field_validator("name", "role", mode="before")
    @classmethod
    def strip_required(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", "linkedin", "department", mode="before")
    @classmethod
    def empty_as_null(cls, v):
        return _blank_to_none(v)


class UpdateTeamMemberRequest(BaseModel):
    """Request to update a team member (only provided fields change)"""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    role: Optional[str] = Field(None, min_length=1, max_length=200)
    department: Optional[str] = Field(None, max_length=100)
    avatar_url: Optional[str] = None
    display_order: Optional[int] = None
    bio: Optional[str] = None
    email: Optional[EmailStr] = None
    linkedin: Optional[str] = None
    status: Optional[MemberStatus] = None

    @field_validator("email", "linkedin", "department", mode="before")
    @classmethod
    def empty_as_null(cls, v):
        return _blank_to_none(v)


class TeamMemberResponse(BaseModel):
    """Team member details"""
    model_config = {"from_attributes": True}

    id: UUID
    name: str
    role: str
    department: Optional[str] = None
    avatar_url: Optional[str] = None
    display_order: int = 0
    bio: Optional[str] = None
    email: Optional[str] = None
    linkedin: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None

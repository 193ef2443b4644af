"""
Project Request/Response Models
"""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from enum import Enum
from uuid import UUID


class ProjectStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    IN_PROGRESS = "in-progress"


class CreateProjectRequest(BaseModel):
    """Request to add a portfolio project"""
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    tagline: Optional[str] = None
    status: ProjectStatus = ProjectStatus.ACTIVE
    tech_stack: List[str] = Field(default_factory=list)
    key_features: Optional[List[str]] = None
    image_url: Optional[str] = None
    github_url: Optional[str] = None
    demo_url: Optional[str] = None
    case_study_urls: Optional[List[str]] = None
    featured: bool = False


class UpdateProjectRequest(BaseModel):
    """Request to update a portfolio project"""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    tagline: Optional[str] = None
    status: Optional[ProjectStatus] = None
    tech_stack: Optional[List[str]] = None
    key_features: Optional[List[str]] = None
    image_url: Optional[str] = None
    github_url: Optional[str] = None
    demo_url: Optional[str] = None
    case_study_urls: Optional[List[str]] = None
    featured: Optional[bool] = None


class ProjectResponse(BaseModel):
    """Project details with flattened tech stack"""
    model_config = {"from_attributes": True}

    id: UUID
    title: str
    description: Optional[str] = None
    tagline: Optional[str] = None
    status: Optional[str] = None
    tech_stack: List[str] = Field(default_factory=list)
    key_features: Optional[List[str]] = None
    image_url: Optional[str] = None
    github_url: Optional[str] = None
    demo_url: Optional[str] = None
    case_study_urls: Optional[List[str]] = None
    featured: bool = False
    created_at: Optional[datetime] = None

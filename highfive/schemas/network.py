"""
Network Request/Response Models
Partners and collaborations
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from uuid import UUID


class CreatePartnerRequest(BaseModel):
    """Request to add an official partner"""
    name: str = Field(..., min_length=1, max_length=200)
    role: Optional[str] = None
    description: Optional[str] = None
    logo_url: Optional[str] = None
    link_url: Optional[str] = None


class UpdatePartnerRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    role: Optional[str] = None
    description: Optional[str] = None
    logo_url: Optional[str] = None
    link_url: Optional[str] = None


class PartnerResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: UUID
    name: str
    role: Optional[str] = None
    description: Optional[str] = None
    logo_url: Optional[str] = None
    link_url: Optional[str] = None
    created_at: Optional[datetime] = None


class CreateCollaborationRequest(BaseModel):
    """Request to add a collaboration"""
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    highlight: Optional[str] = None
    logo_url: Optional[str] = None
    link_url: Optional[str] = None


class UpdateCollaborationRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    highlight: Optional[str] = None
    logo_url: Optional[str] = None
    link_url: Optional[str] = None


class CollaborationResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: UUID
    name: str
    description: Optional[str] = None
    highlight: Optional[str] = None
    logo_url: Optional[str] = None
    link_url: Optional[str] = None
    created_at: Optional[datetime] = None

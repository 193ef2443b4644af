"""
Service Request/Response Models
"""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from uuid import UUID


class CreateServiceRequest(BaseModel):
    """Request to add a service offering"""
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    features: List[str] = Field(default_factory=list, description="Ordered feature bullet points")
    icon: Optional[str] = Field(None, description="Icon tag, e.g. 'code' or 'palette'")
    sort_order: int = 0
    is_active: bool = True


class UpdateServiceRequest(BaseModel):
    """Request to update a service offering"""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    features: Optional[List[str]] = None
    icon: Optional[str] = None
    sort_order: Optional[int] = None
    is_active: Optional[bool] = None


class ServiceResponse(BaseModel):
    """Service offering details"""
    model_config = {"from_attributes": True}

    id: UUID
    title: str
    description: Optional[str] = None
    features: List[str] = Field(default_factory=list)
    icon: Optional[str] = None
    sort_order: int = 0
    is_active: bool = True
    created_at: Optional[datetime] = None

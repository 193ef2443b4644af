"""
Package Request/Response Models
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime
from uuid import UUID


class PackageFeature(BaseModel):
    """One line of a package's feature list"""
    name: str = Field(..., min_length=1, max_length=200)
    included: bool = True

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v


class CreatePackageRequest(BaseModel):
    """Request to add a pricing package"""
    name: str = Field(..., min_length=1, max_length=200)
    price: str = Field(..., min_length=1, max_length=100, description="Display price, e.g. '₹4,999'")
    description: Optional[str] = None
    features: List[PackageFeature] = Field(default_factory=list)
    is_recommended: bool = False
    sort_order: int = 0
    is_active: bool = True

    @field_validator("name", "price", mode="before")
    @classmethod
    def strip_required(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("description", mode="before")
    @classmethod
    def empty_as_null(cls, v):
        if isinstance(v, str):
            return v.strip() or None
        return v


class UpdatePackageRequest(BaseModel):
    """Request to update a pricing package (only provided fields change)"""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    price: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    features: Optional[List[PackageFeature]] = None
    is_recommended: Optional[bool] = None
    sort_order: Optional[int] = None
    is_active: Optional[bool] = None

    @field_validator("name", "price", mode="before")
    @classmethod
    def strip_required(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("description", mode="before")
    @classmethod
    def empty_as_null(cls, v):
        if isinstance(v, str):
            return v.strip() or None
        return v


class PackageResponse(BaseModel):
    """Pricing package details"""
    model_config = {"from_attributes": True}

    id: UUID
    name: str
    price: str
    description: Optional[str] = None
    features: List[PackageFeature] = Field(default_factory=list)
    is_recommended: bool = False
    sort_order: int = 0
    is_active: bool = True
    created_at: Optional[datetime] = None

"""
Public Submission Models
Job applications, feedback, contact messages and chat
"""

from pydantic import BaseModel, EmailStr, Field
from typing import List, Literal, Optional
from datetime import datetime
from uuid import UUID


class CreateApplicationRequest(BaseModel):
    """Job application from the apply page"""
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    role: Optional[str] = None
    portfolio_url: Optional[str] = None
    resume_url: Optional[str] = None
    message: Optional[str] = None


class ApplicationResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: UUID
    name: str
    email: str
    role: Optional[str] = None
    portfolio_url: Optional[str] = None
    resume_url: Optional[str] = None
    message: Optional[str] = None
    created_at: Optional[datetime] = None


class CreateFeedbackRequest(BaseModel):
    """Visitor feedback (no login required)"""
    name: Optional[str] = None
    email: Optional[str] = None
    rating: int = Field(..., ge=1, le=5)
    message: str = Field(..., min_length=1)
    project_id: Optional[UUID] = None


class UpdateFeedbackRequest(BaseModel):
    """Admin moderation of a feedback entry"""
    is_approved: Optional[bool] = None
    name: Optional[str] = None
    email: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    message: Optional[str] = None
    project_id: Optional[UUID] = None


class FeedbackResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: UUID
    name: str
    email: Optional[str] = None
    rating: int
    message: str
    is_approved: bool = True
    project_id: Optional[UUID] = None
    created_at: Optional[datetime] = None


class ContactRequest(BaseModel):
    """Contact form message, forwarded to the team mailbox"""
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    reason: str = Field(..., min_length=1, max_length=50)
    message: str = Field(..., min_length=1)


class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    messages: List[ChatMessage] = Field(..., min_length=1)


class ChatResponse(BaseModel):
    reply: str
    fallback: bool = False


class UploadResponse(BaseModel):
    url: str


class MultipleUploadResponse(BaseModel):
    urls: List[str]
    errors: Optional[List[str]] = None
    count: int

"""
Project Model
Portfolio entries with grouped tech stack
"""

from sqlalchemy import Column, String, Boolean, Text, DateTime, func
from sqlalchemy.dialects.postgresql import UUID, JSONB, ARRAY
import uuid
from highfive.database import Base


class Project(Base):
    __tablename__ = "projects"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    tagline = Column(Text, nullable=True)

    # active / completed / in-progress
    status = Column(String(20), server_default="active", nullable=False)

    # {"frontend": [], "backend": [], "database": [], "other": []}
    tech_stack = Column(JSONB, nullable=True)
    key_features = Column(ARRAY(Text), nullable=True)
    image_url = Column(Text, nullable=True)

    # External links
    github_url = Column(Text, nullable=True)
    demo_url = Column(Text, nullable=True)
    case_study_urls = Column(ARRAY(Text), nullable=True)

    featured = Column(Boolean, server_default="false", nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

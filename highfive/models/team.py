"""
Team Member Model
People shown on the team page and network graph
"""

from sqlalchemy import Column, String, Integer, Text, DateTime, func
from sqlalchemy.dialects.postgresql import UUID
import uuid
from highfive.database import Base


class TeamMember(Base):
    __tablename__ = "team_members"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    role = Column(String(200), nullable=False)
    department = Column(String(100), nullable=True)
    avatar_url = Column(Text, nullable=True)
    display_order = Column(Integer, server_default="0", nullable=False)
    bio = Column(Text, nullable=True)
    email = Column(String(255), unique=True, nullable=True)
    linkedin = Column(Text, nullable=True)

    # Active / Alumni / Mentor
    status = Column(String(20), server_default="Active")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

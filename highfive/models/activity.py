"""
Activity Model
Entries of the public activity feed
"""

from sqlalchemy import Column, String, DateTime, func
from sqlalchemy.dialects.postgresql import UUID
import uuid
from highfive.database import Base


class Activity(Base):
    __tablename__ = "activity"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # project / member / announcement
    type = Column(String(20), nullable=False)
    title = Column(String(300), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

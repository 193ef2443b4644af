"""
Event Model
Workshops, meetups and other company events
"""

from sqlalchemy import Column, String, Boolean, Text, Date, DateTime, func
from sqlalchemy.dialects.postgresql import UUID, ARRAY
import uuid
from highfive.database import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    event_date = Column(Date, nullable=False, index=True)
    location = Column(String(200), nullable=True)
    image_url = Column(Text, nullable=True)
    category = Column(String(100), nullable=True)

    # upcoming / ongoing / completed
    status = Column(String(20), server_default="upcoming", nullable=False)
    featured = Column(Boolean, server_default="false", nullable=False)
    organizers = Column(ARRAY(Text), nullable=False, server_default="{}")
    tags = Column(ARRAY(Text), nullable=False, server_default="{}")
    registration_url = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

"""
Package Model
Pricing packages managed from the admin panel
"""

from sqlalchemy import Column, String, Integer, Boolean, Text, DateTime, func
from sqlalchemy.dialects.postgresql import UUID, JSONB
import uuid
from highfive.database import Base


class Package(Base):
    __tablename__ = "packages"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    price = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    features = Column(JSONB, nullable=False, server_default="[]")  # [{"name": ..., "included": bool}]
    is_recommended = Column(Boolean, server_default="false", nullable=False)
    sort_order = Column(Integer, server_default="0", nullable=False)
    is_active = Column(Boolean, server_default="true", nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

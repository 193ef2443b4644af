"""
Network Models
Official partners and collaborations
"""

from sqlalchemy import Column, String, Text, DateTime, func
from sqlalchemy.dialects.postgresql import UUID
import uuid
from highfive.database import Base


class NetworkPartner(Base):
    __tablename__ = "network_partners"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    role = Column(String(200), nullable=True)
    description = Column(Text, nullable=True)
    logo_url = Column(Text, nullable=True)
    link_url = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class NetworkCollaboration(Base):
    __tablename__ = "network_collaborations"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    highlight = Column(Text, nullable=True)
    logo_url = Column(Text, nullable=True)
    link_url = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

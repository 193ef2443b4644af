"""
Database Models
Import all models here for Alembic migrations
"""

from highfive.models.team import TeamMember
from highfive.models.service import Service
from highfive.models.package import Package
from highfive.models.project import Project
from highfive.models.activity import Activity
from highfive.models.network import NetworkPartner, NetworkCollaboration
from highfive.models.event import Event
from highfive.models.submission import Application, Feedback

__all__ = [
    "TeamMember",
    "Service",
    "Package",
    "Project",
    "Activity",
    "NetworkPartner",
    "NetworkCollaboration",
    "Event",
    "Application",
    "Feedback",
]

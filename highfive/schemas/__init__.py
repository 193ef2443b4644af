"""
Pydantic schemas for request/response validation
"""

from highfive.schemas.team import CreateTeamMemberRequest, UpdateTeamMemberRequest, TeamMemberResponse
from highfive.schemas.service import CreateServiceRequest, UpdateServiceRequest, ServiceResponse
from highfive.schemas.project import CreateProjectRequest, UpdateProjectRequest, ProjectResponse
from highfive.schemas.activity import CreateActivityRequest, ActivityResponse
from highfive.schemas.event import CreateEventRequest, UpdateEventRequest, EventResponse

__all__ = [
    "CreateTeamMemberRequest",
    "UpdateTeamMemberRequest",
    "TeamMemberResponse",
    "CreateServiceRequest",
    "UpdateServiceRequest",
    "ServiceResponse",
    "CreateProjectRequest",
    "UpdateProjectRequest",
    "ProjectResponse",
    "CreateActivityRequest",
    "ActivityResponse",
    "CreateEventRequest",
    "UpdateEventRequest",
    "EventResponse",
]

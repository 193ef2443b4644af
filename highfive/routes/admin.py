"""
Admin Routes
Content management endpoints for allowlisted admins
"""

from fastapi import APIRouter, Depends, status, UploadFile, File
from typing import List
from uuid import UUID

from highfive.auth import get_current_admin
from highfive.schemas.team import CreateTeamMemberRequest, UpdateTeamMemberRequest, TeamMemberResponse
from highfive.schemas.service import CreateServiceRequest, UpdateServiceRequest, ServiceResponse
from highfive.schemas.package import CreatePackageRequest, UpdatePackageRequest, PackageResponse
from highfive.schemas.project import CreateProjectRequest, UpdateProjectRequest, ProjectResponse
from highfive.schemas.activity import CreateActivityRequest, ActivityResponse
from highfive.schemas.event import CreateEventRequest, UpdateEventRequest, EventResponse
from highfive.schemas.network import (
    CreatePartnerRequest,
    UpdatePartnerRequest,
    PartnerResponse,
    CreateCollaborationRequest,
    UpdateCollaborationRequest,
    CollaborationResponse,
)
from highfive.schemas.submission import (
    ApplicationResponse,
    UpdateFeedbackRequest,
    FeedbackResponse,
    UploadResponse,
    MultipleUploadResponse,
)
from highfive.services.team_service import team_service
from highfive.services.offering_service import offering_service
from highfive.services.package_service import package_service
from highfive.services.project_service import project_service
from highfive.services.activity_service import activity_service
from highfive.services.event_service import event_service
from highfive.services.network_service import partner_service, collaboration_service
from highfive.services.submission_service import application_service, feedback_service
from highfive.services.storage_service import storage_service

router = APIRouter()


# Team

@router.post("/team", response_model=TeamMemberResponse, status_code=status.HTTP_201_CREATED)
async def create_team_member(
    request: CreateTeamMemberRequest,
    current_admin: dict = Depends(get_current_admin)
):
    """
    Add a team member

    - **email**: optional, must not be used by another member
    """
    return await team_service.create_member(request.model_dump())


@router.put("/team/{member_id}", response_model=TeamMemberResponse)
async def update_team_member(
    member_id: UUID,
    request: UpdateTeamMemberRequest,
    current_admin: dict = Depends(get_current_admin)
):
    return await team_service.update_member(member_id, request.model_dump(exclude_unset=True))


@router.delete("/team/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_team_member(member_id: UUID, current_admin: dict = Depends(get_current_admin)):
    await team_service.delete(member_id)
    return None


# Services

@router.post("/services", response_model=ServiceResponse, status_code=status.HTTP_201_CREATED)
async def create_service(request: CreateServiceRequest, current_admin: dict = Depends(get_current_admin)):
    return await offering_service.create(request.model_dump())


@router.put("/services/{service_id}", response_model=ServiceResponse)
async def update_service(
    service_id: UUID,
    request: UpdateServiceRequest,
    current_admin: dict = Depends(get_current_admin)
):
    return await offering_service.update(service_id, request.model_dump(exclude_unset=True))


@router.delete("/services/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service(service_id: UUID, current_admin: dict = Depends(get_current_admin)):
    await offering_service.delete(service_id)
    return None


# Projects

@router.post("/projects", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(request: CreateProjectRequest, current_admin: dict = Depends(get_current_admin)):
    """
    Add a portfolio project

    - **tech_stack**: flat list; stored grouped by frontend/backend/database/other
    """
    return await project_service.create(request.model_dump())


@router.put("/projects/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: UUID,
    request: UpdateProjectRequest,
    current_admin: dict = Depends(get_current_admin)
):
    return await project_service.update(project_id, request.model_dump(exclude_unset=True))


@router.delete("/projects/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(project_id: UUID, current_admin: dict = Depends(get_current_admin)):
    await project_service.delete(project_id)
    return None


# Activity feed

@router.post("/activity", response_model=ActivityResponse, status_code=status.HTTP_201_CREATED)
async def create_activity(request: CreateActivityRequest, current_admin: dict = Depends(get_current_admin)):
    return await activity_service.create(request.model_dump())


@router.delete("/activity/{activity_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_activity(activity_id: UUID, current_admin: dict = Depends(get_current_admin)):
    await activity_service.delete(activity_id)
    return None


# Network

@router.post("/network/partners", response_model=PartnerResponse, status_code=status.HTTP_201_CREATED)
async def create_partner(request: CreatePartnerRequest, current_admin: dict = Depends(get_current_admin)):
    return await partner_service.create(request.model_dump())


@router.put("/network/partners/{partner_id}", response_model=PartnerResponse)
async def update_partner(
    partner_id: UUID,
    request: UpdatePartnerRequest,
    current_admin: dict = Depends(get_current_admin)
):
    return await partner_service.update(partner_id, request.model_dump(exclude_unset=True))


@router.delete("/network/partners/{partner_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_partner(partner_id: UUID, current_admin: dict = Depends(get_current_admin)):
    await partner_service.delete(partner_id)
    return None


@router.post("/network/collaborations", response_model=CollaborationResponse, status_code=status.HTTP_201_CREATED)
async def create_collaboration(
    request: CreateCollaborationRequest,
    current_admin: dict = Depends(get_current_admin)
):
    return await collaboration_service.create(request.model_dump())


@router.put("/network/collaborations/{collaboration_id}", response_model=CollaborationResponse)
async def update_collaboration(
    collaboration_id: UUID,
    request: UpdateCollaborationRequest,
    current_admin: dict = Depends(get_current_admin)
):
    return await collaboration_service.update(collaboration_id, request.model_dump(exclude_unset=True))


@router.delete("/network/collaborations/{collaboration_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_collaboration(collaboration_id: UUID, current_admin: dict = Depends(get_current_admin)):
    await collaboration_service.delete(collaboration_id)
    return None


# Packages

@router.get("/admin/packages", response_model=List[PackageResponse])
async def list_admin_packages(current_admin: dict = Depends(get_current_admin)):
    """All packages, active or not"""
    return await package_service.list_packages()


@router.post("/admin/packages", response_model=PackageResponse, status_code=status.HTTP_201_CREATED)
async def create_package(request: CreatePackageRequest, current_admin: dict = Depends(get_current_admin)):
    """
    Add a pricing package

    - **features**: list of {"name", "included"} lines
    """
    return await package_service.create(request.model_dump())


@router.put("/admin/packages/{package_id}", response_model=PackageResponse)
async def update_package(
    package_id: UUID,
    request: UpdatePackageRequest,
    current_admin: dict = Depends(get_current_admin)
):
    return await package_service.update(package_id, request.model_dump(exclude_unset=True))


@router.delete("/admin/packages/{package_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_package(package_id: UUID, current_admin: dict = Depends(get_current_admin)):
    await package_service.delete(package_id)
    return None


# Events

@router.get("/admin/events", response_model=List[EventResponse])
async def list_admin_events(current_admin: dict = Depends(get_current_admin)):
    """All events, newest first"""
    return await event_service.list_admin()


@router.post("/admin/events", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(request: CreateEventRequest, current_admin: dict = Depends(get_current_admin)):
    """
    Add an event

    - **organizers**, **tags**: list or comma-separated string
    """
    return await event_service.create(request.model_dump())


@router.put("/admin/events/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: UUID,
    request: UpdateEventRequest,
    current_admin: dict = Depends(get_current_admin)
):
    return await event_service.update(event_id, request.model_dump(exclude_unset=True))


@router.delete("/admin/events/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(event_id: UUID, current_admin: dict = Depends(get_current_admin)):
    await event_service.delete(event_id)
    return None


# Applications and feedback

@router.get("/applications", response_model=List[ApplicationResponse])
async def list_applications(current_admin: dict = Depends(get_current_admin)):
    """Latest job applications"""
    return await application_service.list_all()


@router.get("/admin/feedback", response_model=List[FeedbackResponse])
async def list_all_feedback(current_admin: dict = Depends(get_current_admin)):
    """All feedback, approved or not"""
    return await feedback_service.list_all()


@router.put("/admin/feedback/{feedback_id}", response_model=FeedbackResponse)
async def update_feedback(
    feedback_id: UUID,
    request: UpdateFeedbackRequest,
    current_admin: dict = Depends(get_current_admin)
):
    return await feedback_service.update(feedback_id, request.model_dump(exclude_unset=True))


@router.delete("/admin/feedback/{feedback_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_feedback(feedback_id: UUID, current_admin: dict = Depends(get_current_admin)):
    await feedback_service.delete(feedback_id)
    return None


# Uploads

@router.post("/upload", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_image(
    file: UploadFile = File(...),
    current_admin: dict = Depends(get_current_admin)
):
    """Upload one image to Supabase Storage (max 5MB)"""

    content = await file.read()
    url = await storage_service.upload_image(file.filename, content, file.content_type)
    return {"url": url}


@router.post("/upload/multiple", response_model=MultipleUploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_images(
    files: List[UploadFile] = File(...),
    current_admin: dict = Depends(get_current_admin)
):
    """Upload up to 10 images; per-file failures are reported, not raised"""

    payload = [(f.filename, await f.read(), f.content_type) for f in files]
    urls, errors = await storage_service.upload_many(payload)

    return {"urls": urls, "errors": errors or None, "count": len(urls)}

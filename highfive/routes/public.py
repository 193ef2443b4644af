"""
Public Endpoints
Site content reads and public form submissions
"""

import asyncio
from fastapi import APIRouter, HTTPException, status
from typing import List, Set
from uuid import UUID

from highfive.config import settings
from highfive.schemas.team import TeamMemberResponse
from highfive.schemas.service import ServiceResponse
from highfive.schemas.package import PackageResponse
from highfive.schemas.project import ProjectResponse
from highfive.schemas.activity import ActivityResponse
from highfive.schemas.event import EventResponse
from highfive.schemas.network import PartnerResponse, CollaborationResponse
from highfive.schemas.submission import (
    CreateApplicationRequest,
    ApplicationResponse,
    CreateFeedbackRequest,
    FeedbackResponse,
    ContactRequest,
    ChatRequest,
    ChatResponse,
)
from highfive.services.team_service import team_service
from highfive.services.offering_service import offering_service
from highfive.services.package_service import package_service
from highfive.services.project_service import project_service
from highfive.services.activity_service import activity_service
from highfive.services.event_service import event_service
from highfive.services.network_service import partner_service, collaboration_service
from highfive.services.submission_service import application_service, feedback_service
from highfive.services.email_service import email_service
from highfive.services.chat_service import chat_service

router = APIRouter()

# Pending notification tasks, held until they finish
_background_tasks: Set[asyncio.Task] = set()


@router.get("/team", response_model=List[TeamMemberResponse])
async def list_team():
    """Team members in display order"""
    return await team_service.list_all()


@router.get("/services", response_model=List[ServiceResponse])
async def list_services(active_only: bool = False):
    """Service offerings by sort order"""
    return await offering_service.list_services(active_only=active_only)


@router.get("/packages", response_model=List[PackageResponse])
async def list_packages():
    """Active pricing packages by sort order"""
    return await package_service.list_packages(active_only=True)


@router.get("/projects", response_model=List[ProjectResponse])
async def list_projects(featured: bool = False):
    """Portfolio projects, newest first"""
    return await project_service.list_projects(featured_only=featured)


@router.get("/projects/{project_id}", response_model=ProjectResponse)
async def get_project(project_id: UUID):
    return await project_service.get(project_id)


@router.get("/activity", response_model=List[ActivityResponse])
async def list_activity():
    """Latest activity feed entries"""
    return await activity_service.list_all()


@router.get("/events", response_model=List[EventResponse])
async def list_events():
    """Events by date, soonest first"""
    return await event_service.list_public()


@router.get("/network/partners", response_model=List[PartnerResponse])
async def list_partners():
    return await partner_service.list_all()


@router.get("/network/collaborations", response_model=List[CollaborationResponse])
async def list_collaborations():
    return await collaboration_service.list_all()


@router.get("/feedback", response_model=List[FeedbackResponse])
async def list_feedback():
    """Approved feedback only"""
    return await feedback_service.list_approved()


@router.post("/feedback", response_model=FeedbackResponse, status_code=status.HTTP_201_CREATED)
async def submit_feedback(request: CreateFeedbackRequest):
    """
    Submit feedback (no login required)

    Blank names are stored as "Anonymous"; entries are approved on submission.
    """
    return await feedback_service.submit(request.model_dump())


@router.post("/applications", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def submit_application(request: CreateApplicationRequest):
    """Submit a job application and notify the team"""

    application = await application_service.create(request.model_dump())

    # Notify the team in background (non-blocking)
    task = asyncio.create_task(email_service.notify_new_application(application))
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)

    return application


@router.post("/contact")
async def send_contact_message(request: ContactRequest):
    """Forward a contact form message to the team mailbox"""

    sent = await email_service.send_contact_message(
        request.name, request.email, request.reason, request.message
    )

    if not sent:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Could not send your message. Please email us at {settings.TEAM_EMAIL}."
        )

    return {
        "status": "success",
        "message": "Thanks for reaching out! We'll get back to you soon."
    }


@router.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest):
    """Site assistant reply; falls back to a fixed message when the model is unreachable"""
    return await chat_service.reply([m.model_dump() for m in request.messages])

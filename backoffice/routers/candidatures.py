"""API routes for admission applications."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import sessionmaker

from backoffice.core.config import settings
from backoffice.core.storage import get_session_factory
from backoffice.schemas.candidature import (
    CandidatureCreate,
    CandidatureDetail,
    CandidatureListItem,
    CandidatureResult,
    DecisionRequest,
)
from backoffice.schemas.common import SuccessResponse
from backoffice.services.application_service import (
    ApplicationService,
    create_application_service,
)

router = APIRouter(tags=["candidatures"])


async def get_application_service(
    session_factory: sessionmaker = Depends(get_session_factory),
) -> ApplicationService:
    """Create application service with dependencies."""
    return create_application_service(
        session_factory, strict_decisions=settings.strict_decisions
    )


@router.post("", response_model=CandidatureResult)
async def submit_candidature(
    request: CandidatureCreate,
    service: ApplicationService = Depends(get_application_service),
):
    """Score the quiz answers and record the application."""
    return await service.submit_application(request)


@router.get("", response_model=list[CandidatureListItem])
async def list_candidatures(
    statut: str | None = Query(default=None, description="Filter by status"),
    service: ApplicationService = Depends(get_application_service),
):
    """List applications, newest first."""
    return await service.list_candidatures(statut=statut)


@router.get("/{candidature_id}", response_model=CandidatureDetail)
async def get_candidature(
    candidature_id: int,
    service: ApplicationService = Depends(get_application_service),
):
    """Get one application with its recorded answers."""
    return await service.get_candidature(candidature_id)


@router.put("/{candidature_id}", response_model=SuccessResponse)
async def record_decision(
    candidature_id: int,
    request: DecisionRequest,
    service: ApplicationService = Depends(get_application_service),
):
    """Record (or overwrite) the administrative decision."""
    return await service.record_decision(candidature_id, request)

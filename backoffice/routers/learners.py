"""API routes for learners and their comments."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import sessionmaker

from backoffice.core.storage import get_session_factory
from backoffice.schemas.common import ChangeResponse, CreatedResponse
from backoffice.schemas.learner import (
    CommentCreate,
    CommentOut,
    LearnerCreate,
    LearnerListItem,
)
from backoffice.services.catalog_service import LearnerService

router = APIRouter(prefix="/api/apprenants", tags=["apprenants"])
comments_router = APIRouter(prefix="/api/commentaires", tags=["apprenants"])


async def get_learner_service(
    session_factory: sessionmaker = Depends(get_session_factory),
) -> LearnerService:
    return LearnerService(session_factory)


@router.get("", response_model=list[LearnerListItem])
async def list_learners(
    search: str | None = Query(
        default=None, description="Substring of last name, first name or email"
    ),
    service: LearnerService = Depends(get_learner_service),
):
    return await service.list_learners(search=search)


@router.post("", response_model=CreatedResponse)
async def create_learner(
    request: LearnerCreate, service: LearnerService = Depends(get_learner_service)
):
    return CreatedResponse(id=await service.create(request))


@router.put("/{apprenant_id}", response_model=ChangeResponse)
async def update_learner(
    apprenant_id: int,
    request: LearnerCreate,
    service: LearnerService = Depends(get_learner_service),
):
    changes = await service.replace(apprenant_id, request)
    return ChangeResponse(message="Apprenant updated successfully", changes=changes)


@router.delete("/{apprenant_id}", response_model=ChangeResponse)
async def delete_learner(
    apprenant_id: int, service: LearnerService = Depends(get_learner_service)
):
    changes = await service.delete(apprenant_id)
    return ChangeResponse(message="Apprenant deleted successfully", changes=changes)


@comments_router.get("/{apprenant_id}", response_model=list[CommentOut])
async def list_comments(
    apprenant_id: int, service: LearnerService = Depends(get_learner_service)
):
    return await service.list_comments(apprenant_id)


@comments_router.post("", response_model=CreatedResponse)
async def add_comment(
    request: CommentCreate, service: LearnerService = Depends(get_learner_service)
):
    return CreatedResponse(id=await service.add_comment(request))

"""API routes for cohorts (promotions)."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import sessionmaker

from backoffice.core.storage import get_session_factory
from backoffice.schemas.cohort import CohortCreate, CohortListItem
from backoffice.schemas.common import ChangeResponse, CreatedResponse
from backoffice.services.catalog_service import CohortService

router = APIRouter(prefix="/api/promotions", tags=["promotions"])


async def get_cohort_service(
    session_factory: sessionmaker = Depends(get_session_factory),
) -> CohortService:
    return CohortService(session_factory)


@router.get("", response_model=list[CohortListItem])
async def list_cohorts(service: CohortService = Depends(get_cohort_service)):
    """Cohorts with program and referent names, newest first."""
    return await service.list_cohorts()


@router.post("", response_model=CreatedResponse)
async def create_cohort(
    request: CohortCreate, service: CohortService = Depends(get_cohort_service)
):
    return CreatedResponse(id=await service.create(request))


@router.put("/{promotion_id}", response_model=ChangeResponse)
async def update_cohort(
    promotion_id: int,
    request: CohortCreate,
    service: CohortService = Depends(get_cohort_service),
):
    changes = await service.replace(promotion_id, request)
    return ChangeResponse(message="Promotion updated successfully", changes=changes)


@router.delete("/{promotion_id}", response_model=ChangeResponse)
async def delete_cohort(
    promotion_id: int, service: CohortService = Depends(get_cohort_service)
):
    changes = await service.delete(promotion_id)
    return ChangeResponse(message="Promotion deleted successfully", changes=changes)

"""API routes for staff members."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import sessionmaker

from backoffice.core.storage import get_session_factory
from backoffice.schemas.common import ChangeResponse, CreatedResponse
from backoffice.schemas.staff import (
    CertificationCreate,
    CertificationOut,
    StaffCreate,
    StaffOut,
)
from backoffice.services.catalog_service import StaffService

router = APIRouter(prefix="/api/personnel", tags=["personnel"])


async def get_staff_service(
    session_factory: sessionmaker = Depends(get_session_factory),
) -> StaffService:
    return StaffService(session_factory)


@router.get("", response_model=list[StaffOut])
async def list_staff(service: StaffService = Depends(get_staff_service)):
    return await service.list_all()


@router.post("", response_model=CreatedResponse)
async def create_staff_member(
    request: StaffCreate, service: StaffService = Depends(get_staff_service)
):
    return CreatedResponse(id=await service.create(request))


@router.put("/{personnel_id}", response_model=ChangeResponse)
async def update_staff_member(
    personnel_id: int,
    request: StaffCreate,
    service: StaffService = Depends(get_staff_service),
):
    changes = await service.replace(personnel_id, request)
    return ChangeResponse(message="Personnel updated successfully", changes=changes)


@router.delete("/{personnel_id}", response_model=ChangeResponse)
async def delete_staff_member(
    personnel_id: int, service: StaffService = Depends(get_staff_service)
):
    """Delete a staff member unless they are the referent of a cohort."""
    changes = await service.delete(personnel_id)
    return ChangeResponse(message="Personnel deleted successfully", changes=changes)


@router.get("/{personnel_id}/formations", response_model=list[CertificationOut])
async def list_certifications(
    personnel_id: int, service: StaffService = Depends(get_staff_service)
):
    return await service.list_certifications(personnel_id)


@router.post("/{personnel_id}/formations", response_model=CreatedResponse)
async def add_certification(
    personnel_id: int,
    request: CertificationCreate,
    service: StaffService = Depends(get_staff_service),
):
    return CreatedResponse(id=await service.add_certification(personnel_id, request))

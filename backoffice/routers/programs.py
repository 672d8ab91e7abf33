"""API routes for training programs."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import sessionmaker

from backoffice.core.storage import get_session_factory
from backoffice.schemas.common import ChangeResponse, CreatedResponse
from backoffice.schemas.program import ProgramCreate, ProgramOut
from backoffice.services.catalog_service import ProgramService

router = APIRouter(prefix="/api/filieres", tags=["filieres"])


async def get_program_service(
    session_factory: sessionmaker = Depends(get_session_factory),
) -> ProgramService:
    return ProgramService(session_factory)


@router.get("", response_model=list[ProgramOut])
async def list_programs(service: ProgramService = Depends(get_program_service)):
    return await service.list_all()


@router.get("/{filiere_id}", response_model=ProgramOut)
async def get_program(
    filiere_id: int, service: ProgramService = Depends(get_program_service)
):
    return await service.get(filiere_id)


@router.post("", response_model=CreatedResponse)
async def create_program(
    request: ProgramCreate, service: ProgramService = Depends(get_program_service)
):
    return CreatedResponse(id=await service.create(request))


@router.put("/{filiere_id}", response_model=ChangeResponse)
async def update_program(
    filiere_id: int,
    request: ProgramCreate,
    service: ProgramService = Depends(get_program_service),
):
    changes = await service.replace(filiere_id, request)
    return ChangeResponse(message="Filiere updated successfully", changes=changes)


@router.delete("/{filiere_id}", response_model=ChangeResponse)
async def delete_program(
    filiere_id: int, service: ProgramService = Depends(get_program_service)
):
    changes = await service.delete(filiere_id)
    return ChangeResponse(message="Filiere deleted successfully", changes=changes)

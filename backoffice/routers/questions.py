"""API routes for quiz questions."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import sessionmaker

from backoffice.core.storage import get_session_factory
from backoffice.schemas.common import ChangeResponse, CreatedResponse
from backoffice.schemas.question import QuestionCreate, QuestionOut
from backoffice.services.question_bank import QuestionBank

router = APIRouter(prefix="/api/questions", tags=["questions"])


async def get_question_bank(
    session_factory: sessionmaker = Depends(get_session_factory),
) -> QuestionBank:
    return QuestionBank(session_factory)


@router.get("/{filiere_id}", response_model=list[QuestionOut])
async def list_program_questions(
    filiere_id: int,
    bank: QuestionBank = Depends(get_question_bank),
):
    """Questions of a program in insertion order (empty for unknown programs)."""
    return await bank.fetch_questions(filiere_id)


@router.post("", response_model=CreatedResponse)
async def create_question(
    request: QuestionCreate,
    bank: QuestionBank = Depends(get_question_bank),
):
    return CreatedResponse(id=await bank.add_question(request))


@router.delete("/item/{question_id}", response_model=ChangeResponse)
async def delete_question(
    question_id: int,
    bank: QuestionBank = Depends(get_question_bank),
):
    changes = await bank.delete_question(question_id)
    return ChangeResponse(message="Question deleted successfully", changes=changes)

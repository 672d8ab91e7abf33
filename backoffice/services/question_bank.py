"""Access to the per-program question banks."""

import logging
from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker

from backoffice.core.exceptions import NotFoundError, ReferenceConflictError
from backoffice.models.question import Question
from backoffice.schemas.question import QuestionCreate

logger = logging.getLogger(__name__)


async def select_program_questions(
    session: AsyncSession, program_id: int | None
) -> Sequence[Question]:
    """Questions of a program in insertion order (ascending id)."""
    if program_id is None:
        return []
    result = await session.execute(
        select(Question)
        .where(Question.filiere_id == program_id)
        .order_by(Question.id)
    )
    return result.scalars().all()


class QuestionBank:
    """Reads and maintains the quiz questions attached to programs."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    async def fetch_questions(self, program_id: int | None) -> list[Question]:
        """Return the program's questions; empty for unknown programs."""
        async with self.session_factory() as session:
            return list(await select_program_questions(session, program_id))

    async def add_question(self, payload: QuestionCreate) -> int:
        async with self.session_factory() as session:
            question = Question(**payload.model_dump())
            session.add(question)
            await session.commit()
            logger.info(
                f"Question {question.id} added to program {question.filiere_id}"
            )
            return question.id

    async def delete_question(self, question_id: int) -> int:
        async with self.session_factory() as session:
            try:
                result = await session.execute(
                    delete(Question).where(Question.id == question_id)
                )
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ReferenceConflictError(
                    "Question",
                    question_id,
                    "This question already has recorded answers and cannot be deleted.",
                ) from e

            if result.rowcount == 0:
                raise NotFoundError("Question", question_id)
            return result.rowcount

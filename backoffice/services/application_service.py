"""Admission workflow: scored submission and administrative decisions."""

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from backoffice.core.exceptions import InvalidDecisionError, NotFoundError
from backoffice.models._time import utc_now
from backoffice.models.candidature import (
    STATUS_PENDING,
    Candidature,
    CandidatureAnswer,
)
from backoffice.models.program import Program
from backoffice.models.question import Question
from backoffice.schemas.candidature import (
    AnswerOut,
    CandidatureCreate,
    CandidatureDetail,
    CandidatureListItem,
    CandidatureResult,
    DecisionRequest,
)
from backoffice.schemas.common import SuccessResponse
from backoffice.services.question_bank import select_program_questions
from backoffice.services.scoring import score_answers
from backoffice.utils.validators import validate_decision

logger = logging.getLogger(__name__)


class ApplicationService:
    """Records candidate submissions and the decisions taken on them.

    The session factory is borrowed from the process; the service never
    disposes of the underlying engine.
    """

    def __init__(self, session_factory: sessionmaker, strict_decisions: bool = False):
        self.session_factory = session_factory
        self.strict_decisions = strict_decisions

    async def submit_application(self, request: CandidatureCreate) -> CandidatureResult:
        """Score the quiz and persist the application with its answers.

        The question fetch, the application row and every answer row share one
        transaction: either all of them are stored or none is.
        """
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    questions = await select_program_questions(
                        session, request.filiere_id
                    )
                    result = score_answers(questions, request.reponses)

                    candidature = Candidature(
                        nom=request.nom,
                        prenom=request.prenom,
                        email=request.email,
                        motivation=request.motivation,
                        filiere_id=request.filiere_id,
                        score=result.score,
                        statut=STATUS_PENDING,
                        date_candidature=utc_now(),
                    )
                    session.add(candidature)
                    await session.flush()

                    session.add_all(
                        CandidatureAnswer(
                            candidature_id=candidature.id,
                            question_id=answer.question_id,
                            reponse_donnee=answer.submitted,
                            est_correct=answer.correct,
                        )
                        for answer in result.answers
                    )
        except SQLAlchemyError as e:
            logger.error(
                f"Failed to record candidature for program {request.filiere_id}: {e}"
            )
            raise

        logger.info(
            f"Candidature {candidature.id} recorded for program {request.filiere_id}: "
            f"{result.score}/{result.total}"
        )
        return CandidatureResult(
            id=candidature.id, score=result.score, total=result.total
        )

    async def record_decision(
        self, candidature_id: int, request: DecisionRequest
    ) -> SuccessResponse:
        """Overwrite status, comment and justification, stamping the decision time.

        Any previous decision is replaced.
        """
        async with self.session_factory() as session:
            if self.strict_decisions:
                # Unknown ids are reported as not found before the decision is judged.
                if await session.get(Candidature, candidature_id) is None:
                    raise NotFoundError("Candidature", candidature_id)
                validation = validate_decision(request)
                if not validation.is_valid:
                    raise InvalidDecisionError(candidature_id, validation.error)
                for warning in validation.warnings:
                    logger.warning(f"Candidature {candidature_id}: {warning}")

            result = await session.execute(
                update(Candidature)
                .where(Candidature.id == candidature_id)
                .values(
                    statut=request.statut,
                    decision_admin=request.decision_admin,
                    justification_refus=request.justification_refus,
                    date_decision=utc_now(),
                )
            )
            await session.commit()

        if result.rowcount == 0:
            raise NotFoundError("Candidature", candidature_id)

        logger.info(f"Candidature {candidature_id} decided: {request.statut}")
        return SuccessResponse()

    async def list_candidatures(
        self, statut: str | None = None
    ) -> list[CandidatureListItem]:
        """Applications, newest first, with their program name."""
        query = (
            select(Candidature, Program.nom)
            .outerjoin(Program, Program.id == Candidature.filiere_id)
            .order_by(Candidature.date_candidature.desc(), Candidature.id.desc())
        )
        if statut:
            query = query.where(Candidature.statut == statut)

        async with self.session_factory() as session:
            rows = (await session.execute(query)).all()

        return [
            CandidatureListItem.model_validate(candidature).model_copy(
                update={"filiere_nom": filiere_nom}
            )
            for candidature, filiere_nom in rows
        ]

    async def get_candidature(self, candidature_id: int) -> CandidatureDetail:
        """Application with each recorded answer and the question it answers."""
        async with self.session_factory() as session:
            row = (
                await session.execute(
                    select(Candidature, Program.nom)
                    .outerjoin(Program, Program.id == Candidature.filiere_id)
                    .where(Candidature.id == candidature_id)
                )
            ).first()
            if row is None:
                raise NotFoundError("Candidature", candidature_id)

            answer_rows = (
                await session.execute(
                    select(CandidatureAnswer, Question.question, Question.bonne_reponse)
                    .join(Question, Question.id == CandidatureAnswer.question_id)
                    .where(CandidatureAnswer.candidature_id == candidature_id)
                    .order_by(CandidatureAnswer.id)
                )
            ).all()

        candidature, filiere_nom = row
        answers = [
            AnswerOut.model_validate(answer).model_copy(
                update={"question": text, "bonne_reponse": correct}
            )
            for answer, text, correct in answer_rows
        ]
        return CandidatureDetail.model_validate(candidature).model_copy(
            update={"filiere_nom": filiere_nom, "reponses": answers}
        )


# Factory function for dependency injection
def create_application_service(
    session_factory: sessionmaker, strict_decisions: bool = False
) -> ApplicationService:
    """Factory function to create ApplicationService with dependencies."""
    return ApplicationService(session_factory, strict_decisions=strict_decisions)

"""Programs, cohorts, learners and staff."""

import logging

from sqlalchemy import func, or_, select

from backoffice.core.exceptions import NotFoundError, ReferenceConflictError
from backoffice.models.cohort import Cohort
from backoffice.models.learner import Learner, LearnerComment
from backoffice.models.program import Program
from backoffice.models.staff import StaffMember, TrainerCertification
from backoffice.schemas.cohort import CohortListItem
from backoffice.schemas.learner import CommentCreate, LearnerListItem
from backoffice.schemas.staff import CertificationCreate
from backoffice.services.crud import CrudService

logger = logging.getLogger(__name__)


class ProgramService(CrudService):
    """Training programs (filières)."""

    model = Program
    label = "Filiere"


class CohortService(CrudService):
    """Cohorts (promotions) with their program and referent."""

    model = Cohort
    label = "Promotion"

    async def list_cohorts(self) -> list[CohortListItem]:
        rows = await self._rows(
            select(Cohort, Program.nom, StaffMember.nom, StaffMember.prenom)
            .outerjoin(Program, Program.id == Cohort.filiere_id)
            .outerjoin(StaffMember, StaffMember.id == Cohort.referent_id)
            .order_by(Cohort.created_at.desc(), Cohort.id.desc())
        )
        return [
            CohortListItem.model_validate(cohort).model_copy(
                update={
                    "filiere_nom": filiere_nom,
                    "referent_nom": referent_nom,
                    "referent_prenom": referent_prenom,
                }
            )
            for cohort, filiere_nom, referent_nom, referent_prenom in rows
        ]


class LearnerService(CrudService):
    """Learners (apprenants) and their follow-up comments."""

    model = Learner
    label = "Apprenant"

    async def list_learners(self, search: str | None = None) -> list[LearnerListItem]:
        """Learners newest first; ``search`` matches name, first name or email."""
        query = (
            select(Learner, Cohort.nom, Program.nom)
            .outerjoin(Cohort, Cohort.id == Learner.promo_id)
            .outerjoin(Program, Program.id == Cohort.filiere_id)
            .order_by(Learner.created_at.desc(), Learner.id.desc())
        )
        if search:
            # Literal substring: % and _ in the search text are escaped.
            needle = search.lower()
            query = query.where(
                or_(
                    func.lower(Learner.nom).contains(needle, autoescape=True),
                    func.lower(Learner.prenom).contains(needle, autoescape=True),
                    func.lower(Learner.email).contains(needle, autoescape=True),
                )
            )

        rows = await self._rows(query)
        return [
            LearnerListItem.model_validate(learner).model_copy(
                update={"promo_nom": promo_nom, "filiere_nom": filiere_nom}
            )
            for learner, promo_nom, filiere_nom in rows
        ]

    async def list_comments(self, learner_id: int) -> list[LearnerComment]:
        """Comments of a learner, newest first."""
        rows = await self._rows(
            select(LearnerComment)
            .where(LearnerComment.apprenant_id == learner_id)
            .order_by(LearnerComment.date_creation.desc(), LearnerComment.id.desc())
        )
        return [comment for (comment,) in rows]

    async def add_comment(self, payload: CommentCreate) -> int:
        async with self.session_factory() as session:
            if await session.get(Learner, payload.apprenant_id) is None:
                raise NotFoundError(self.label, payload.apprenant_id)
            comment = LearnerComment(**payload.model_dump())
            session.add(comment)
            await session.commit()
        logger.info(f"Comment {comment.id} added to learner {payload.apprenant_id}")
        return comment.id


class StaffService(CrudService):
    """Staff members (personnel) and their trainer certifications."""

    model = StaffMember
    label = "Personnel"

    async def _check_can_delete(self, session, row_id: int) -> None:
        referenced = await session.scalar(
            select(func.count())
            .select_from(Cohort)
            .where(Cohort.referent_id == row_id)
        )
        if referenced:
            raise ReferenceConflictError(
                self.label,
                row_id,
                "This staff member is a referent for one or more promotions. "
                "Assign a new referent before deleting them.",
            )

    async def list_certifications(self, staff_id: int) -> list[TrainerCertification]:
        await self.get(staff_id)
        rows = await self._rows(
            select(TrainerCertification)
            .where(TrainerCertification.personnel_id == staff_id)
            .order_by(TrainerCertification.id)
        )
        return [certification for (certification,) in rows]

    async def add_certification(
        self, staff_id: int, payload: CertificationCreate
    ) -> int:
        async with self.session_factory() as session:
            if await session.get(StaffMember, staff_id) is None:
                raise NotFoundError(self.label, staff_id)
            certification = TrainerCertification(
                personnel_id=staff_id, **payload.model_dump()
            )
            session.add(certification)
            await session.commit()
        return certification.id

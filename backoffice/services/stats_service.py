"""Dashboard counters."""

from sqlalchemy import func, select
from sqlalchemy.orm import sessionmaker

from backoffice.models.candidature import (
    STATUS_ACCEPTED,
    STATUS_PENDING,
    STATUS_REJECTED,
    Candidature,
)
from backoffice.models.cohort import Cohort
from backoffice.models.learner import Learner
from backoffice.models.program import Program
from backoffice.schemas.stats import DashboardStats


class StatsService:
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    async def get_stats(self) -> DashboardStats:
        async with self.session_factory() as session:
            programs = await session.scalar(select(func.count()).select_from(Program))
            cohorts = await session.scalar(select(func.count()).select_from(Cohort))
            learners = await session.scalar(select(func.count()).select_from(Learner))
            by_status = dict(
                (
                    await session.execute(
                        select(Candidature.statut, func.count()).group_by(
                            Candidature.statut
                        )
                    )
                ).all()
            )

        return DashboardStats(
            filieres=programs,
            promotions=cohorts,
            apprenants=learners,
            candidatures_en_attente=by_status.get(STATUS_PENDING, 0),
            candidatures_acceptees=by_status.get(STATUS_ACCEPTED, 0),
            candidatures_refusees=by_status.get(STATUS_REJECTED, 0),
        )

"""API routers."""

from backoffice.routers.candidatures import router as candidatures_router
from backoffice.routers.cohorts import router as cohorts_router
from backoffice.routers.learners import comments_router
from backoffice.routers.learners import router as learners_router
from backoffice.routers.programs import router as programs_router
from backoffice.routers.questions import router as questions_router
from backoffice.routers.staff import router as staff_router
from backoffice.routers.stats import router as stats_router

__all__ = [
    "candidatures_router",
    "cohorts_router",
    "comments_router",
    "learners_router",
    "programs_router",
    "questions_router",
    "staff_router",
    "stats_router",
]

"""API route for dashboard statistics."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import sessionmaker

from backoffice.core.storage import get_session_factory
from backoffice.schemas.stats import DashboardStats
from backoffice.services.stats_service import StatsService

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("", response_model=DashboardStats)
async def get_stats(session_factory: sessionmaker = Depends(get_session_factory)):
    """Counters shown on the dashboard home page."""
    return await StatsService(session_factory).get_stats()

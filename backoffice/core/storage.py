"""Database connection and storage utilities."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import event, func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from backoffice.core.config import settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str, **options: Any) -> AsyncEngine:
    """Create an async engine, enabling foreign keys on SQLite connections."""
    engine = create_async_engine(database_url, **options)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def build_session_factory(bind: AsyncEngine) -> sessionmaker:
    """Session factory shared by every service for the lifetime of the process."""
    return sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


engine: AsyncEngine = build_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
)

async_session = build_session_factory(engine)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


def get_session_factory() -> sessionmaker:
    """FastAPI dependency returning the process-wide session factory."""
    return async_session


class SchoolStorage:
    """Schema creation and demo data."""

    @staticmethod
    async def init_models(bind: AsyncEngine | None = None) -> None:
        """Create all tables that do not exist yet."""
        import backoffice.models  # noqa: F401  (registers every table)

        async with (bind or engine).begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    @staticmethod
    async def seed_sample_data(session_factory: sessionmaker | None = None) -> bool:
        """Insert the demo catalogue into an empty database.

        Returns False without writing anything when programs already exist.
        """
        from backoffice.models import (
            Cohort,
            Learner,
            Program,
            Question,
            StaffMember,
        )
        from backoffice.core.sample_data import (
            SAMPLE_COHORTS,
            SAMPLE_LEARNERS,
            SAMPLE_PROGRAMS,
            SAMPLE_QUESTIONS,
            SAMPLE_STAFF,
        )

        async with (session_factory or async_session)() as session:
            async with session.begin():
                existing = await session.scalar(
                    select(func.count()).select_from(Program)
                )
                if existing:
                    logger.info(f"Sample data skipped: {existing} programs present")
                    return False

                session.add_all(Program(**row) for row in SAMPLE_PROGRAMS)
                session.add_all(StaffMember(**row) for row in SAMPLE_STAFF)
                await session.flush()
                session.add_all(Question(**row) for row in SAMPLE_QUESTIONS)
                session.add_all(Cohort(**row) for row in SAMPLE_COHORTS)
                await session.flush()
                session.add_all(Learner(**row) for row in SAMPLE_LEARNERS)

        logger.info(
            f"Seeded {len(SAMPLE_PROGRAMS)} programs, {len(SAMPLE_QUESTIONS)} questions "
            f"and {len(SAMPLE_LEARNERS)} learners"
        )
        return True

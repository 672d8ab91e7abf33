"""Row-level create/update/delete shared by the catalogue services."""

import logging
from typing import Any, ClassVar

from pydantic import BaseModel
from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from backoffice.core.exceptions import NotFoundError, ReferenceConflictError
from backoffice.core.storage import Base

logger = logging.getLogger(__name__)


class CrudService:
    """Insert, fetch, replace and delete rows of one table by primary key.

    Subclasses set ``model`` and ``label``; ``label`` appears in messages
    returned to the dashboard (e.g. "Filiere updated successfully").
    """

    model: ClassVar[type[Base]]
    label: ClassVar[str]

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    async def get(self, row_id: int) -> Any:
        async with self.session_factory() as session:
            row = await session.get(self.model, row_id)
        if row is None:
            raise NotFoundError(self.label, row_id)
        return row

    async def create(self, payload: BaseModel, **extra: Any) -> int:
        async with self.session_factory() as session:
            row = self.model(**payload.model_dump(), **extra)
            session.add(row)
            await session.commit()
        logger.info(f"{self.label} {row.id} created")
        return row.id

    async def replace(self, row_id: int, payload: BaseModel) -> int:
        """Overwrite every writable column; returns the number of rows changed."""
        async with self.session_factory() as session:
            result = await session.execute(
                update(self.model)
                .where(self.model.id == row_id)
                .values(**payload.model_dump())
            )
            await session.commit()

        if result.rowcount == 0:
            raise NotFoundError(self.label, row_id)
        logger.info(f"{self.label} {row_id} updated")
        return result.rowcount

    async def delete(self, row_id: int) -> int:
        async with self.session_factory() as session:
            await self._check_can_delete(session, row_id)
            try:
                result = await session.execute(
                    delete(self.model).where(self.model.id == row_id)
                )
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                logger.warning(f"Refused to delete {self.label} {row_id}: {e.orig}")
                raise ReferenceConflictError(self.label, row_id) from e

        if result.rowcount == 0:
            raise NotFoundError(self.label, row_id)
        logger.info(f"{self.label} {row_id} deleted")
        return result.rowcount

    async def _check_can_delete(self, session, row_id: int) -> None:
        """Hook for business rules that forbid a deletion."""

    async def list_all(self) -> list:
        """Every row, newest first."""
        async with self.session_factory() as session:
            result = await session.execute(
                select(self.model).order_by(
                    self.model.created_at.desc(), self.model.id.desc()
                )
            )
            return list(result.scalars().all())

    async def _rows(self, query) -> list:
        async with self.session_factory() as session:
            return list((await session.execute(query)).all())

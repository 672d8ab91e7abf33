"""Training program (filière) model."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.core.storage import Base
from backoffice.models._time import utc_now


class Program(Base):
    """A named training track with its own question bank."""

    __tablename__ = "filieres"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nom: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    objectifs: Mapped[str | None] = mapped_column(Text, nullable=True)
    programme: Mapped[str | None] = mapped_column(Text, nullable=True)
    modalites: Mapped[str | None] = mapped_column(Text, nullable=True)
    accessibilite: Mapped[str | None] = mapped_column(Text, nullable=True)
    image: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, nullable=False
    )
